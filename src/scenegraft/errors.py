"""Exception classes raised while resolving composite nodes.

Every error here aborts resolution synchronously; nothing is retried. They
all derive from ``CompositionError``, itself a ``ValueError``, so callers that
only care about "the scene definition is wrong" can catch one type.
"""


class CompositionError(ValueError):
    """Base class for errors raised while composing a scene."""


class ConfigurationError(CompositionError):
    """Missing or invalid template identifier, or no host parent to resolve into."""


class TemplateNotFoundError(ConfigurationError):
    """No template is registered or stored under the requested identifier."""

    def __init__(self, template_id: str, searched: list | None = None) -> None:
        self.template_id = template_id
        self.searched = list(searched or [])
        message = f"Template '{template_id}' not found"
        if self.searched:
            message += f" (searched: {', '.join(str(p) for p in self.searched)})"
        super().__init__(message)


class TemplateSyntaxError(ConfigurationError):
    """A template or scene document does not follow the node schema."""


class TypeMismatchError(CompositionError):
    """A template whose root is not a container was given overrides."""


class OverCommitError(CompositionError):
    """More overrides were supplied than the template has slots."""

    def __init__(self, override_count: int, slot_count: int) -> None:
        self.override_count = override_count
        self.slot_count = slot_count
        super().__init__(
            f"Composite has more children ({override_count}) "
            f"than the template has slots ({slot_count})"
        )


class ConsistencyError(CompositionError):
    """Some overrides declare a target slot id and others do not."""


class UnresolvedIdError(CompositionError):
    """An override targets a slot id that is not among the available slots."""

    def __init__(self, slot_id: int, override_name: str) -> None:
        self.slot_id = slot_id
        self.override_name = override_name
        super().__init__(
            f"Override '{override_name}' targets slot id {slot_id}, "
            "which is not an available slot in the template"
        )
