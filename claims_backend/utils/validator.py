from typing import Any, Callable, List, NamedTuple, Tuple

MAX_DESCRIPTION_LENGTH = 500


class FieldRule(NamedTuple):
    field: str
    check: Callable[[Any], bool]
    message: str


def _required(v: Any) -> bool:
    return isinstance(v, str) and bool(v.strip())


def _max_length(limit: int) -> Callable[[Any], bool]:
    def check(v: Any) -> bool:
        return v is None or len(v) <= limit
    return check


# -----------------------------
# Rules for create/update claim requests
# -----------------------------
CLAIM_RULES: Tuple[FieldRule, ...] = (
    FieldRule("type", _required, "The Type field is required"),
    FieldRule("value", _required, "The Value field is required"),
    FieldRule("value_type", _required, "The ValueType field is required."),
    FieldRule("display_text", _required, "The DisplayText field is required."),
    FieldRule(
        "description",
        _max_length(MAX_DESCRIPTION_LENGTH),
        f"The Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters.",
    ),
)


def validate(request: Any, rules: Tuple[FieldRule, ...] = CLAIM_RULES) -> Tuple[bool, List[str]]:
    """
    Apply every rule to ``request`` and collect all violations.

    Returns ``(True, [])`` when the request is valid, otherwise ``(False, messages)``
    with one message per failed rule. Never raises: a rule that blows up on an
    odd value counts as a violation.
    """
    errors: List[str] = []
    for rule in rules:
        try:
            ok = rule.check(getattr(request, rule.field, None))
        except (TypeError, ValueError):
            ok = False
        if not ok:
            errors.append(rule.message)
    return not errors, errors
