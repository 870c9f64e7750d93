# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Verify singleton types by introspection
=======================================

The functions in this module check whether a type satisfies the singleton
contract, i.e.

- it has exactly one class-level slot holding the unique instance,
- all of its fields are private,
- the slot is final and already set (eager initialization) or mutable and
  set on first access (lazy initialization),
- it declares exactly one constructor, which cannot be called from outside,
- it declares a public ``get_instance()`` method returning its own type and a
  public ``__str__()`` method returning :py:class:`str`,
- ``get_instance()`` always returns the same object,
- converting the instance to :py:class:`str` yields the expected name.

"Private" means name-mangled, i.e. written as ``__name`` in the class body.
"Final" means annotated with :py:data:`typing.Final`.

Each ``check_*`` function stops at the first failed assertion and raises a
:py:class:`StructuralNonConformance` or :py:class:`BehavioralNonConformance`.
:py:func:`verify` runs all checks and summarizes the results in a
:py:class:`pandas.DataFrame`.

Examples
--------
>>> verify(PCSEChairEager, "eager")
                 check        kind  passed message
0       initialization  structural    True
1          single_slot  structural    True
...
>>> assert_conforms(PCSEChairEager, "eager")


Programming reference
---------------------

.. autofunction:: verify
.. autofunction:: assert_conforms
.. autofunction:: check_single_slot
.. autofunction:: check_fields_private
.. autofunction:: check_eager_slot
.. autofunction:: check_lazy_slot
.. autofunction:: check_slot_unchanged
.. autofunction:: check_private_constructor
.. autofunction:: check_method
.. autofunction:: check_same_instance
.. autofunction:: check_display_name
.. autofunction:: find_slots
.. autofunction:: find_fields
.. autofunction:: find_constructors
"""
import functools
import inspect
import logging
import typing

import pandas as pd

from . import config
from .exceptions import (BehavioralNonConformance, NonConformance,
                         StructuralNonConformance)
from .helper.singleton import is_final_annotation


_logger = logging.getLogger(__name__)

accessor_name = "get_instance"
"""Name of the method returning the unique instance"""

report_columns = ["check", "kind", "passed", "message"]
"""Columns of the DataFrame returned by :py:func:`verify`"""


def _is_dunder(name):
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _is_data(value):
    return not (inspect.isroutine(value) or inspect.isclass(value) or
                isinstance(value, (classmethod, staticmethod, property)) or
                inspect.ismemberdescriptor(value))


def _bare_annotations(cls):
    ns = vars(cls)
    return [(n, a) for n, a in inspect.get_annotations(cls).items()
            if n not in ns and not _is_dunder(n)]


def _is_class_level(annotation):
    return (is_final_annotation(annotation) or annotation is typing.ClassVar or
            typing.get_origin(annotation) is typing.ClassVar)


def find_slots(cls):
    """Find class-level state declared in the class body

    Methods, properties, nested classes, dunder names and ``__slots__``
    members are not considered. Names that are only annotated count if they
    are annotated as :py:data:`typing.ClassVar` or :py:data:`typing.Final`;
    other bare annotations declare instance variables.

    Parameters
    ----------
    cls : type
        Type to inspect

    Returns
    -------
    list of str
        Attribute names as stored in the class namespace
    """
    ns = vars(cls)
    ret = [n for n, v in ns.items() if not _is_dunder(n) and _is_data(v)]
    ret += [n for n, a in _bare_annotations(cls) if _is_class_level(a)]
    return ret


def find_fields(cls):
    """Like :py:func:`find_slots`, but include instance variables

    These are ``__slots__`` members and names with a bare annotation that
    does not declare class-level state.
    """
    members = [n for n, v in vars(cls).items()
               if inspect.ismemberdescriptor(v) and not _is_dunder(n)]
    members += [n for n, a in _bare_annotations(cls)
                if not _is_class_level(a)]
    return find_slots(cls) + members


@config.use_defaults
def find_constructors(cls, constructor_names=None):
    """Find constructors declared in the class body

    Parameters
    ----------
    cls : type
        Type to inspect
    constructor_names : collection of str or None, optional
        Method names which count as constructors. If `None`, use the
        ``constructor_names`` entry of :py:attr:`config.rc`.

    Returns
    -------
    list of str
    """
    ns = vars(cls)
    return [n for n in constructor_names if n in ns]


def is_private(cls, name):
    """True if `name` is a mangled private name of `cls`"""
    prefix = f"_{cls.__name__.lstrip('_')}__"
    return name.startswith(prefix) and len(name) > len(prefix)


def is_public(name):
    """True if `name` is neither private nor protected"""
    return not name.startswith("_") or _is_dunder(name)


def is_final(cls, name):
    """True if `name` is annotated as :py:data:`typing.Final` in `cls`"""
    return is_final_annotation(inspect.get_annotations(cls).get(name))


def get_slot_value(cls, name):
    """Read a class-level slot without triggering any accessor

    Returns `None` for slots which are only annotated.
    """
    return vars(cls).get(name)


def _get_accessor(cls, check):
    accessor = getattr(cls, accessor_name, None)
    if not callable(accessor):
        raise StructuralNonConformance(
            cls, check,
            f"'{cls.__name__}' doesn't have method '{accessor_name}()'")
    return accessor


def check_single_slot(cls):
    """Only one class-level slot should exist

    Returns
    -------
    str
        Name of the slot
    """
    slots = find_slots(cls)
    _logger.debug("Class-level slots of %s: %s", cls.__name__, slots)
    if len(slots) != 1:
        raise StructuralNonConformance(
            cls, "single_slot",
            f"only one class-level slot should exist in '{cls.__name__}', "
            f"found {len(slots)}: {slots}")
    return slots[0]


def check_fields_private(cls):
    """All fields (class-level and instance variables) should be private"""
    for f in find_fields(cls):
        if not is_private(cls, f):
            raise StructuralNonConformance(
                cls, "fields_private",
                f"field '{cls.__name__}.{f}' is not private")


def check_eager_slot(cls):
    """The slot should be final and hold the instance already

    Does not call the accessor.

    Returns
    -------
    object
        The slot's value
    """
    check = "initialization"
    slot = check_single_slot(cls)
    if not is_final(cls, slot):
        raise StructuralNonConformance(
            cls, check,
            f"class-level slot '{cls.__name__}.{slot}' should be final")
    value = get_slot_value(cls, slot)
    if value is None:
        raise BehavioralNonConformance(
            cls, check,
            f"slot '{cls.__name__}.{slot}' is not eagerly initialized")
    if not isinstance(value, cls):
        raise BehavioralNonConformance(
            cls, check, f"slot '{cls.__name__}.{slot}' has the wrong type")
    return value


def check_slot_unchanged(cls, expected):
    """The slot should still hold `expected`"""
    slot = check_single_slot(cls)
    if get_slot_value(cls, slot) is not expected:
        raise BehavioralNonConformance(
            cls, "slot_unchanged",
            f"unique instance '{cls.__name__}.{slot}' changed value after "
            "initialization")


def check_lazy_slot(cls):
    """The slot should be mutable and hold `None` until first access

    This calls the accessor, so it only succeeds once per process unless the
    slot is reset in between.

    Returns
    -------
    object
        The instance stored by the accessor
    """
    check = "initialization"
    slot = check_single_slot(cls)
    if is_final(cls, slot):
        raise StructuralNonConformance(
            cls, check,
            f"class-level slot '{cls.__name__}.{slot}' should not be final")

    try:
        hint = typing.get_type_hints(cls).get(slot)
    except NameError as e:
        raise StructuralNonConformance(
            cls, check,
            f"cannot resolve type of '{cls.__name__}.{slot}': {e}") from e
    if hint is not None and hint is not cls and cls not in typing.get_args(hint):
        raise StructuralNonConformance(
            cls, check, f"slot '{cls.__name__}.{slot}' has the wrong type")

    if get_slot_value(cls, slot) is not None:
        raise BehavioralNonConformance(
            cls, check,
            f"slot '{cls.__name__}.{slot}' should be lazily initialized")

    instance = _get_accessor(cls, check)()
    value = get_slot_value(cls, slot)
    if value is None or not isinstance(value, cls):
        raise BehavioralNonConformance(
            cls, check,
            f"slot '{cls.__name__}.{slot}' is not set by {accessor_name}()")
    if value is not instance:
        raise BehavioralNonConformance(
            cls, check,
            f"{accessor_name}() should return the object stored in "
            f"'{cls.__name__}.{slot}'")
    return value


def check_private_constructor(cls):
    """Exactly one constructor should be declared and it must not be callable

    The constructor must not require arguments, since the accessor takes
    none. The type's metaclass has to guard construction by overriding
    ``__call__``, and calling the type without arguments has to raise a
    :py:class:`TypeError`. A :py:class:`TypeError` raised by a constructor
    that is reachable through :py:meth:`type.__call__` does not count.

    Returns
    -------
    str
        Name of the constructor
    """
    check = "private_constructor"
    ctors = find_constructors(cls)
    if len(ctors) != 1:
        raise StructuralNonConformance(
            cls, check,
            f"'{cls.__name__}' should declare exactly one constructor, found "
            f"{len(ctors)}: {ctors}")
    name = ctors[0]

    func = vars(cls)[name]
    if isinstance(func, (staticmethod, classmethod)):
        func = func.__func__
    params = list(inspect.signature(func).parameters.values())[1:]
    required = [p.name for p in params
                if p.default is p.empty and
                p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)]
    if required:
        raise StructuralNonConformance(
            cls, check,
            f"constructor in '{cls.__name__}' should not require arguments, "
            f"requires {required}")

    if type(cls).__call__ is not type.__call__:
        try:
            cls()
        except TypeError:
            return name
    raise StructuralNonConformance(
        cls, check, f"constructor in '{cls.__name__}' should be private")


def check_method(cls, name, returns):
    """`cls` should declare a public method returning `returns`

    Parameters
    ----------
    cls : type
        Type to inspect
    name : str
        Method name
    returns : type
        Expected return annotation, after resolving forward references
    """
    check = f"method_{name.strip('_')}"
    ret_name = getattr(returns, "__name__", repr(returns))
    func = vars(cls).get(name)
    if isinstance(func, (staticmethod, classmethod)):
        func = func.__func__
    if not inspect.isfunction(func):
        raise StructuralNonConformance(
            cls, check,
            f"'{cls.__name__}' doesn't have method '{ret_name} {name}()'")
    if not is_public(name):
        raise StructuralNonConformance(
            cls, check, f"'{cls.__name__}.{name}' should be public")

    try:
        ret = typing.get_type_hints(func).get("return")
    except NameError as e:
        raise StructuralNonConformance(
            cls, check,
            f"cannot resolve return type of '{cls.__name__}.{name}': "
            f"{e}") from e
    if ret is not returns:
        raise StructuralNonConformance(
            cls, check,
            f"'{cls.__name__}.{name}' should return a value of type "
            f"'{ret_name}'")


def check_same_instance(cls):
    """Repeated accessor calls should return the identical object"""
    check = "same_instance"
    accessor = _get_accessor(cls, check)
    one = accessor()
    if one is None:
        raise BehavioralNonConformance(
            cls, check, f"{accessor_name}() should return an object")
    two = accessor()
    if two is None:
        raise BehavioralNonConformance(
            cls, check, f"{accessor_name}() should return an object")
    if two is not one:
        raise BehavioralNonConformance(
            cls, check, f"{accessor_name}() should return the same object")


@config.use_defaults
def check_display_name(cls, expected_name=None):
    """Converting the instance to str should yield `expected_name`

    Parameters
    ----------
    cls : type
        Type to inspect
    expected_name : str or None, optional
        If `None`, use the ``expected_name`` entry of :py:attr:`config.rc`.
    """
    check = "display_name"
    instance = _get_accessor(cls, check)()
    if instance is None:
        raise BehavioralNonConformance(
            cls, check, f"{accessor_name}() should return an object")
    name = str(instance)
    if name != expected_name:
        raise BehavioralNonConformance(
            cls, check, f"expected {expected_name!r}, got {name!r}")


def verify(cls, init):
    """Run all checks on a singleton type

    Every check runs on its own and stops at its first failed assertion. The
    initialization check runs first so that it sees the slot before any
    other check calls the accessor.

    Parameters
    ----------
    cls : type
        Singleton type
    init : {"eager", "lazy"}
        Expected initialization mode

    Returns
    -------
    pandas.DataFrame
        One row per check with columns "check", "kind", "passed" and
        "message". "message" is empty for passed checks.
    """
    if init == "eager":
        init_check = check_eager_slot
    elif init == "lazy":
        init_check = check_lazy_slot
    else:
        raise ValueError(f'`init` must be "eager" or "lazy", not {init!r}')

    checks = [
        ("initialization", "structural", init_check),
        ("single_slot", "structural", check_single_slot),
        ("fields_private", "structural", check_fields_private),
        ("private_constructor", "structural", check_private_constructor),
        ("method_get_instance", "structural",
         functools.partial(check_method, name=accessor_name, returns=cls)),
        ("method_str", "structural",
         functools.partial(check_method, name="__str__", returns=str)),
        ("same_instance", "behavioral", check_same_instance),
        ("display_name", "behavioral", check_display_name)]

    rows = []
    initial = None

    def run(name, kind, func):
        _logger.debug("Checking %s of %s", name, cls.__name__)
        try:
            ret = func(cls)
        except NonConformance as e:
            _logger.info("%s failed %s check: %s", cls.__name__, name, e)
            rows.append((name, e.kind, False, str(e)))
            return None
        rows.append((name, kind, True, ""))
        return ret

    for name, kind, func in checks:
        ret = run(name, kind, func)
        if func is init_check:
            initial = ret
    if init == "eager" and initial is not None:
        run("slot_unchanged", "behavioral",
            functools.partial(check_slot_unchanged, expected=initial))

    return pd.DataFrame(rows, columns=report_columns)


def assert_conforms(cls, init):
    """Raise the first failure reported by :py:func:`verify`

    Parameters
    ----------
    cls : type
        Singleton type
    init : {"eager", "lazy"}
        Expected initialization mode

    Raises
    ------
    StructuralNonConformance, BehavioralNonConformance
        If any check failed. The exception's ``report`` attribute holds the
        full report.
    """
    report = verify(cls, init)
    failed = report[~report["passed"]]
    if failed.empty:
        return
    first = failed.iloc[0]
    exc_type = (StructuralNonConformance if first["kind"] == "structural"
                else BehavioralNonConformance)
    raise exc_type(cls, first["check"], f"{first['check']}: {first['message']}",
                   report=report)
