"""Capability probing over opaque host objects.

Host terminal APIs drift between releases: a method is renamed, grows a
parameter, moves one level down into a session or connector object, or turns
private. Everything here answers one question, "can this object do X with these
arguments?", and reports the answer as a value instead of raising.

Lookup order for a member called ``name``:

1. public spellings: ``name`` and its snake_case/camelCase twin
2. non-public spellings: ``_name`` and the name-mangled ``_Owner__name`` for
   every class in the MRO

A member matches only if it is a routine and the arguments bind to its
signature. Arguments are also checked against any parameter annotations that
are plain classes, so ``write(data: bytes)`` won't match a ``str``.
"""

import inspect
import logging
import typing

from smartcopy.delivery.types import CapabilityProbe
from smartcopy.utils.text import name_variants

logger = logging.getLogger("smartcopy")

_MISSING = object()


def type_name(obj) -> str:
    """Fully-qualified type name of an object, e.g. 'pkg.mod.Outer.Inner'."""
    cls = type(obj)
    module = getattr(cls, "__module__", None) or ""
    qualname = getattr(cls, "__qualname__", None) or cls.__name__
    return f"{module}.{qualname}" if module and module != "builtins" else qualname


def _dedupe(names):
    seen = set()
    out = []
    for n in names:
        if n not in seen:
            seen.add(n)
            out.append(n)
    return out


def _public_spellings(name: str) -> list[str]:
    return name_variants(name)


def _private_spellings(obj, name: str) -> list[str]:
    spellings = []
    for variant in name_variants(name.lstrip("_")):
        spellings.append(f"_{variant}")
        for cls in type(obj).__mro__:
            owner = cls.__name__.lstrip("_")
            if owner:
                spellings.append(f"_{owner}__{variant}")
    return _dedupe(spellings)


def _spellings(obj, name: str) -> list[str]:
    return _dedupe(_public_spellings(name) + _private_spellings(obj, name))


def _has_dynamic_attrs(obj) -> bool:
    return hasattr(type(obj), "__getattr__")


def _resolve_member(obj, spelling: str):
    """Return the bound callable for ``spelling``, or None if it isn't a method."""
    static = inspect.getattr_static(obj, spelling, _MISSING)
    if static is _MISSING:
        if not _has_dynamic_attrs(obj):
            return None
    elif not (inspect.isroutine(static) or isinstance(static, (staticmethod, classmethod))):
        return None

    try:
        member = getattr(obj, spelling)
    except Exception as e:
        logger.debug("Lookup of %s.%s failed: %s", type_name(obj), spelling, e)
        return None
    return member if callable(member) else None


def _type_hints(member) -> dict:
    try:
        return typing.get_type_hints(member)
    except Exception:
        return {}


def _accepts(member, args: tuple) -> bool:
    try:
        sig = inspect.signature(member)
    except (TypeError, ValueError):
        # C-level callables often have no signature; let the call decide
        return True

    try:
        bound = sig.bind(*args)
    except TypeError:
        return False

    hints = _type_hints(member)
    for pname, value in bound.arguments.items():
        param = sig.parameters[pname]
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        expected = hints.get(pname, param.annotation)
        if expected is param.empty or not isinstance(expected, type):
            continue
        if not isinstance(value, expected):
            return False
    return True


def _find_member(obj, name: str, args: tuple):
    for spelling in _spellings(obj, name):
        member = _resolve_member(obj, spelling)
        if member is not None and _accepts(member, args):
            return spelling, member
    return None, None


def has_capability(obj, name: str, args=()) -> bool:
    """True if ``obj`` exposes ``name`` accepting ``args``. Nothing is called."""
    if obj is None:
        return False
    spelling, _ = _find_member(obj, name, tuple(args))
    return spelling is not None


def try_invoke(obj, name: str, args=()) -> CapabilityProbe:
    """Find and call ``name(*args)`` on ``obj``.

    Never raises. A missing member gives a not-applicable probe. A member that
    raises is logged and also reported as not applicable, with ``error`` set.
    """
    args = tuple(args)
    if obj is None:
        return CapabilityProbe(name, len(args))

    spelling, member = _find_member(obj, name, args)
    if member is None:
        return CapabilityProbe(name, len(args))

    try:
        value = member(*args)
    except Exception as e:
        logger.debug("%s.%s(%d args) raised %s: %s",
                     type_name(obj), spelling, len(args), type(e).__name__, e, exc_info=True)
        return CapabilityProbe(name, len(args), False, None, spelling, e)

    return CapabilityProbe(name, len(args), True, value, spelling)


def try_invoke_any(obj, names, args=()) -> CapabilityProbe:
    """Try each method name in order; return the first applicable probe."""
    args = tuple(args)
    last = CapabilityProbe(names[0] if names else "", len(args))
    for name in names:
        probe = try_invoke(obj, name, args)
        if probe.applicable:
            return probe
        last = probe
    return last


def get_field(obj, name: str):
    """Read internal state called ``name`` (or a private spelling of it).

    Checks the instance ``__dict__`` and then walks the MRO for slots,
    properties and plain class attributes. Methods are not fields. Returns None
    when nothing non-None is found.
    """
    if obj is None:
        return None

    try:
        instance_dict = object.__getattribute__(obj, "__dict__")
    except AttributeError:
        instance_dict = None

    for spelling in _spellings(obj, name):
        if isinstance(instance_dict, dict) and spelling in instance_dict:
            value = instance_dict[spelling]
            if value is not None:
                return value
            continue

        for cls in type(obj).__mro__:
            attr = cls.__dict__.get(spelling, _MISSING)
            if attr is _MISSING:
                continue
            if inspect.isroutine(attr) or isinstance(attr, (staticmethod, classmethod)):
                break
            if hasattr(attr, "__get__"):
                try:
                    value = attr.__get__(obj, type(obj))
                except Exception as e:
                    logger.debug("Reading %s.%s failed: %s", type_name(obj), spelling, e)
                    value = None
            else:
                value = attr
            if value is not None:
                return value
            break

    if _has_dynamic_attrs(obj):
        for spelling in _public_spellings(name):
            try:
                value = getattr(obj, spelling)
            except Exception:
                continue
            if value is not None and not callable(value):
                return value

    return None


def try_get_related(obj, names):
    """Descend one level into the object graph.

    Each name is tried first as a zero-argument accessor and then as a field.
    The first non-None result wins.
    """
    if obj is None:
        return None
    for name in names:
        probe = try_invoke(obj, name)
        if probe.applicable and probe.value is not None:
            return probe.value
        value = get_field(obj, name)
        if value is not None:
            return value
    return None


def is_truthy_flag(obj, names, default: bool) -> bool:
    """Read a boolean state flag such as is_connected or is_visible."""
    if obj is None:
        return default
    for name in names:
        probe = try_invoke(obj, name)
        if probe.applicable:
            return bool(probe.value)
        if probe.error is not None:
            return default
        value = get_field(obj, name)
        if value is not None:
            return bool(value)
    return default
