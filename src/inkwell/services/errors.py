"""Domain errors raised by the publishing services."""


class DataIntegrityError(RuntimeError):
    """A stored record references an author or category that does not exist."""


class SlugCollisionError(ValueError):
    """A post slug is already used by a different post."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Slug already in use: {slug}")
        self.slug = slug


class UnknownReferenceError(ValueError):
    """A write refers to a record that cannot be found."""

    def __init__(self, kind: str, ref_id: str) -> None:
        super().__init__(f"{kind} not found: {ref_id}")
        self.kind = kind
        self.ref_id = ref_id
