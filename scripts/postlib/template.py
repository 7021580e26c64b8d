"""
Flat template substitution.

Two passes over the template text:

    1. {{#if key}}...{{/if}} regions are kept when context[key] is
       non-empty and dropped (markers included) otherwise. Regions do not
       nest; each opener pairs with the first {{/if}} after it.
    2. {{key}} placeholders are replaced with context values, or "" for
       anything missing.

Substituted values are inserted as-is and never scanned again.
"""

import re


CONDITIONAL_RE = re.compile(r"\{\{#if (\w+)\}\}(.*?)\{\{/if\}\}", re.DOTALL)
PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def process_conditionals(text, context):
    return CONDITIONAL_RE.sub(
        lambda m: m.group(2) if context.get(m.group(1)) else "",
        text,
    )


def replace_placeholders(text, context):
    def _value(match):
        value = context.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER_RE.sub(_value, text)


def render_template(text, context):
    """Resolve conditionals, then placeholders."""
    return replace_placeholders(process_conditionals(text, context), context)
