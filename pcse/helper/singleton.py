# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Create singleton classes"""
import inspect
import logging
import typing


_logger = logging.getLogger(__name__)


def mangle(cls_name, name):
    """Apply Python's private name mangling

    Parameters
    ----------
    cls_name : str
        Name of the class in whose body `name` appears
    name : str
        Attribute name as written in the class body

    Returns
    -------
    str
        Name as it is stored in the class namespace. Unchanged if `name` is
        not a private name.
    """
    if not name.startswith("__") or name.endswith("__"):
        return name
    stripped = cls_name.lstrip("_")
    if not stripped:
        return name
    return f"_{stripped}{name}"


def instance_slot(cls):
    """Name of the slot holding the unique instance of `cls`"""
    return mangle(cls.__name__, "__instance")


def is_final_annotation(annotation):
    """True if `annotation` is :py:data:`typing.Final` or ``Final[...]``"""
    return (annotation is typing.Final or
            typing.get_origin(annotation) is typing.Final)


class SingletonMeta(type):
    """Metaclass to create singleton types

    Calling a singleton type raises a :py:class:`TypeError`, the unique
    instance has to be obtained via the type's ``get_instance()`` method.
    Class attributes annotated as :py:data:`typing.Final` cannot be rebound
    once they are set.

    If ``eager=True`` is passed as a class keyword, the instance is created
    together with the class and stored in the private ``__instance`` slot.

    Examples
    --------
    >>> class Example(metaclass=SingletonMeta, eager=True):
    ...     __instance: Final["Example"]
    ...     @classmethod
    ...     def get_instance(cls) -> "Example":
    ...         return cls.__instance
    >>> Example.get_instance()
    <__main__.Example object at 0x7fe65a904a20>
    >>> Example()
    Traceback (most recent call last):
      ...
    TypeError: Singletons must be accessed by get_instance()
    """
    def __new__(mcs, name, bases, namespace, eager=False):
        return super().__new__(mcs, name, bases, namespace)

    def __init__(cls, name, bases, namespace, eager=False):
        """Parameters
        ----------
        eager : bool, optional
            Construct the instance right away. Defaults to `False`.
        """
        super().__init__(name, bases, namespace)
        if eager:
            setattr(cls, instance_slot(cls), cls._construct())

    def __call__(cls, *args, **kwargs):
        """Disable new instances of the class

        Raises
        ------
        TypeError
            There can only be one instance.
        """
        raise TypeError("Singletons must be accessed by get_instance()")

    def __setattr__(cls, name, value):
        cls._check_rebind(name)
        super().__setattr__(name, value)

    def __delattr__(cls, name):
        cls._check_rebind(name)
        super().__delattr__(name)

    def _check_rebind(cls, name):
        if name not in vars(cls):
            return
        ann = inspect.get_annotations(cls).get(name)
        if is_final_annotation(ann):
            raise AttributeError(
                f"cannot rebind final attribute '{cls.__name__}.{name}'")

    def _construct(cls, *args, **kwargs):
        """Create an instance, bypassing the public constructor guard

        Parameters
        ----------
        *args, **kwargs
            Passed to the class's ``__new__()`` and ``__init__()``
        """
        _logger.debug("Constructing %s instance", cls.__qualname__)
        return super().__call__(*args, **kwargs)
