from collections.abc import Iterable, Mapping


def _normalize_managed_models(managed_models: Mapping[str, str] | Iterable[str]) -> dict[str, str]:
    """Map each managed class name to its title; bare class names are titled by their short name."""
    if isinstance(managed_models, Mapping):
        return {str(class_name): str(title) for class_name, title in managed_models.items()}
    if isinstance(managed_models, str):
        managed_models = [managed_models]
    return {class_name: class_name.rsplit("\\", 1)[-1] for class_name in managed_models}
