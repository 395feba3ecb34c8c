"""Normalize a record's class ancestry to root-first order."""

from collections.abc import Iterable


def root_first_ancestry(class_name: str, ancestry: Iterable[str] | None) -> list[str]:
    """Return ``ancestry`` ordered from the root class down to ``class_name``.

    Hosts may list ancestry either way round. A list that starts with
    ``class_name`` (and does not also end with it) is leaf-first and gets
    reversed. ``class_name`` is appended when missing.
    """
    classes = list(ancestry or [])
    if classes and classes[0] == class_name and classes[-1] != class_name:
        classes.reverse()
    if not classes or classes[-1] != class_name:
        classes = [c for c in classes if c != class_name]
        classes.append(class_name)
    return classes
