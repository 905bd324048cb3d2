"""Locate and rewrite template invocations with mwparserfromhell."""

import mwparserfromhell as mwp


def find_template(code, name):
    """First template in ``code`` called ``name``, or None."""
    return next((t for t in code.filter_templates() if t.name.matches(name)), None)


def template_params(tpl):
    return {str(p.name).strip(): str(p.value).strip() for p in tpl.params}


def replace_params(tpl, params):
    """Replace every parameter of ``tpl`` with ``params``, one per line."""
    for param in list(tpl.params):
        tpl.remove(param)
    for key, value in params.items():
        tpl.add(key, f"{value}\n", showkey=True, preserve_spacing=False)


def parse(text):
    return mwp.parse(text)
