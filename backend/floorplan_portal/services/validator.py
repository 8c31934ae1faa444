import math
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from floorplan_portal.errors import ValidationError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
TRUTHY = {"on", "true", "1", "yes"}
# Digits with an optional fraction and exponent; no "_", "inf" or "nan"
DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
ROLES = ("student", "architect", "developer", "other")
DEFAULT_ROLE = "student"

# (field, label); values must be > 0
DIMENSION_FIELDS = [
    ("length", "Length"),
    ("width", "Width"),
]

# (field, label, minimum)
COUNT_FIELDS = [
    ("bedrooms", "Number of bedrooms", 0),
    ("drawingRoom", "Number of drawing rooms", 0),
    ("kitchen", "Number of kitchens", 0),
    ("toilet", "Number of toilets", 1),
]
BELOW_MINIMUM = {"toilet": "At least one toilet is required"}

# Older clients post the plot length as `depth`
FIELD_ALIASES = {"length": ("length", "depth")}

# Conditional groups: fields become mandatory once `flag` is set.
CONDITIONAL_GROUPS = {
    "parking": {
        "flag": "hasParking",
        "dimensions": [
            ("parkingLength", "Parking length"),
            ("parkingWidth", "Parking width"),
            ("parkingDepth", "Parking depth"),
        ],
        "counts": [],
        "message": "Parking dimensions must be provided and greater than 0",
    },
    "porch": {
        "flag": "hasPorch",
        "dimensions": [],
        "counts": [("porch", "Number of porches must be at least 1")],
        "message": "Number of porches must be at least 1",
    },
    "veranda": {
        "flag": "hasVeranda",
        "dimensions": [],
        "counts": [("veranda", "Number of verandas must be at least 1")],
        "message": "Number of verandas must be at least 1",
    },
}

BODY_NOT_OBJECT = "Request body must be a JSON object"


# --- value parsing -----------------------------------------------------------

def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value: Any) -> Optional[float]:
    """Float value of a JSON number or plain decimal string, None otherwise."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str) and DECIMAL_RE.match(value.strip()):
            number = float(value.strip())
        else:
            return None
    except OverflowError:
        # integers beyond float range
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_count(value: Any) -> Optional[int]:
    number = parse_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    if isinstance(value, (int, float)):
        return value == 1
    return False


def _get(body: Mapping[str, Any], field: str) -> Any:
    for key in FIELD_ALIASES.get(field, (field,)):
        if not is_blank(body.get(key)):
            return body.get(key)
    return None


def is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _missing_text(value: Any) -> bool:
    return not is_text(value)


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_RE.match(value))


# --- floor plan request ------------------------------------------------------

def _dimension_error(value: Any, label: str) -> Optional[str]:
    if is_blank(value):
        return f"{label} is required"
    number = parse_number(value)
    if number is None:
        return f"{label} must be a number"
    if number <= 0:
        return f"{label} must be greater than 0"
    return None


def _count_error(field: str, value: Any, label: str, minimum: int) -> Optional[str]:
    if is_blank(value):
        return f"{label} is required"
    if parse_number(value) is None:
        return f"{label} must be a number"
    count = parse_count(value)
    if count is None:
        return f"{label} must be a whole number"
    if count < minimum:
        return BELOW_MINIMUM.get(field, f"{label} cannot be negative")
    return None


def collect_floorplan_errors(body: Any) -> Dict[str, str]:
    """Per-field error messages for a floor plan request, in field order.

    An empty dict means the body is valid. The body is never modified.
    """
    if not isinstance(body, Mapping):
        return {"body": BODY_NOT_OBJECT}

    errors: Dict[str, str] = {}
    for field, label in DIMENSION_FIELDS:
        msg = _dimension_error(_get(body, field), label)
        if msg:
            errors[field] = msg
    for field, label, minimum in COUNT_FIELDS:
        msg = _count_error(field, body.get(field), label, minimum)
        if msg:
            errors[field] = msg

    for group in CONDITIONAL_GROUPS.values():
        if not parse_flag(body.get(group["flag"])):
            continue
        for field, label in group["dimensions"]:
            value = body.get(field)
            number = parse_number(value)
            if number is None or number <= 0:
                errors[field] = f"{label} must be greater than 0"
        for field, message in group["counts"]:
            count = parse_count(body.get(field))
            if count is None or count < 1:
                errors[field] = message
    return errors


def validate_floorplan_request(body: Any) -> Tuple[bool, List[str]]:
    """Quick structural checks on a generate-floorplan request body."""
    errors = list(collect_floorplan_errors(body).values())
    return (len(errors) == 0, errors)


def validate_floorplan_form(form: Mapping[str, Any]) -> Dict[str, str]:
    """Like collect_floorplan_errors, but each failing conditional group is
    reported once under the group name instead of per field."""
    errors = collect_floorplan_errors(form)
    for name, group in CONDITIONAL_GROUPS.items():
        fields = [f for f, _ in group["dimensions"]] + [f for f, _ in group["counts"]]
        failed = [f for f in fields if f in errors]
        for f in failed:
            del errors[f]
        if failed:
            errors[name] = group["message"]
    return errors


def normalize_floorplan(body: Mapping[str, Any]) -> Dict[str, Any]:
    """Typed values of an already validated body. Disabled groups are nulled."""
    out: Dict[str, Any] = {}
    for field, _ in DIMENSION_FIELDS:
        out[field] = parse_number(_get(body, field))
    for field, _, _ in COUNT_FIELDS:
        out[field] = parse_count(body.get(field))
    for group in CONDITIONAL_GROUPS.values():
        enabled = parse_flag(body.get(group["flag"]))
        out[group["flag"]] = enabled
        for field, _ in group["dimensions"]:
            out[field] = parse_number(body.get(field)) if enabled else None
        for field, _ in group["counts"]:
            out[field] = parse_count(body.get(field)) if enabled else None
    return out


# --- users -------------------------------------------------------------------

def validate_login(body: Any) -> Tuple[bool, List[str]]:
    if not isinstance(body, Mapping):
        return (False, [BODY_NOT_OBJECT])
    if _missing_text(body.get("email")) or _missing_text(body.get("password")):
        return (False, ["Email and password are required"])
    if not is_valid_email(body.get("email")):
        return (False, ["Invalid email format"])
    return (True, [])


def validate_registration(body: Any) -> Tuple[bool, List[str]]:
    """Server-side registration checks. No password strength policy here."""
    if not isinstance(body, Mapping):
        return (False, [BODY_NOT_OBJECT])
    required = ("fullName", "email", "password", "confirmPassword")
    if any(_missing_text(body.get(k)) for k in required):
        return (False, ["All required fields must be provided"])

    errors: List[str] = []
    if body.get("password") != body.get("confirmPassword"):
        errors.append("Passwords do not match")
    if not is_valid_email(body.get("email")):
        errors.append("Invalid email format")
    return (len(errors) == 0, errors)


def _form_text(form: Mapping[str, Any], key: str) -> str:
    # File uploads and other non-text parts count as blank
    value = form.get(key)
    return value if isinstance(value, str) else ""


def validate_registration_form(form: Mapping[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    full_name = _form_text(form, "fullName").strip()
    if not full_name:
        errors["fullName"] = "Full name is required"
    elif len(full_name) < 2:
        errors["fullName"] = "Full name must be at least 2 characters"

    email = _form_text(form, "email")
    if not email.strip():
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"

    password = _form_text(form, "password")
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < 6:
        errors["password"] = "Password must be at least 6 characters"

    confirm = _form_text(form, "confirmPassword")
    if not confirm:
        errors["confirmPassword"] = "Please confirm your password"
    elif confirm != password:
        errors["confirmPassword"] = "Passwords do not match"

    role = _form_text(form, "role")
    if role and role not in ROLES:
        errors["role"] = "Please choose a valid role"

    return errors


def require_valid(ok: bool, errors: List[str]) -> None:
    if not ok:
        raise ValidationError(errors[0], errors)
