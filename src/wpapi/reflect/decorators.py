# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any, Callable, Self, TypedDict, TypeVar, cast

DECORATED_T = TypeVar("DECORATED_T", bound="Callable[..., Any] | type")


S = TypeVar("S", bound="StackableDecorator")


class DecoratorMetadata(TypedDict):
    decorators: "list[StackableDecorator]"
    decorators_by_type: "dict[Any, list[StackableDecorator]]"


class StackableDecorator:
    _ATTR_NAME: str = "__wpapi_stackable_decorator__"

    def __call__(self, subject: DECORATED_T) -> DECORATED_T:
        self.register(subject, self)
        return subject

    @classmethod
    def decorator_key(cls) -> Any:
        return cls

    @classmethod
    def get_or_set_metadata(cls, subject: Any) -> DecoratorMetadata:
        # Only look at the subject's own namespace so subclasses never
        # append to the metadata of the class they inherit from.
        if cls._ATTR_NAME not in subject.__dict__:
            setattr(
                subject,
                cls._ATTR_NAME,
                DecoratorMetadata(decorators=[], decorators_by_type={}),
            )
        return cast(DecoratorMetadata, getattr(subject, cls._ATTR_NAME))

    @classmethod
    def get_own_metadata(cls, subject: Any) -> DecoratorMetadata | None:
        namespace = getattr(subject, "__dict__", {})
        if cls._ATTR_NAME in namespace:
            return cast(DecoratorMetadata, namespace[cls._ATTR_NAME])
        return None

    @classmethod
    def register(cls, subject: Any, decorator: "StackableDecorator") -> None:
        metadata = cls.get_or_set_metadata(subject)
        metadata["decorators"].append(decorator)
        metadata["decorators_by_type"].setdefault(cls.decorator_key(), []).append(
            decorator
        )

    @classmethod
    def get(cls, subject: Any) -> list[Self]:
        metadata = cls.get_own_metadata(subject)
        if metadata is None:
            return []

        if cls is StackableDecorator:
            return cast(list[Self], metadata["decorators"])
        else:
            return cast(
                list[Self], metadata["decorators_by_type"].get(cls.decorator_key(), [])
            )

    @classmethod
    def get_bound_from_type(
        cls, subject_type: type, inherit: bool = True, last: bool = False
    ) -> Self | None:
        """
        Retrieve the first or last decorator of this type from the given class type.
        """
        return resolve_bound_class_decorators(subject_type, cls, inherit, last=last)


def resolve_class_decorators(
    subject: Any, decorator_cls: type[S], inherit: bool = True
) -> list[S]:
    """
    Resolve decorators for a class or instance, optionally inheriting from base classes.
    """
    # If subject is an instance, get its class
    cls = subject if isinstance(subject, type) else type(subject)

    if not inherit:
        return decorator_cls.get(cls)

    collected: list[S] = []
    # Iterate MRO in reverse to apply base class decorators first
    for base in reversed(cls.mro()):
        collected.extend(decorator_cls.get(base))

    return collected


def resolve_bound_class_decorators(
    subject: Any, decorator_cls: type[S], inherit: bool = True, last: bool = False
) -> S | None:
    """
    Retrieve the first or last decorator of a given type from a class or instance,
    optionally inheriting from base classes.
    """
    decorators = resolve_class_decorators(subject, decorator_cls, inherit)
    if not decorators:
        return None
    return decorators[-1] if last else decorators[0]
