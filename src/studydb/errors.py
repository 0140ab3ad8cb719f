class InvalidIdError(ValueError):
    """A caller-supplied identifier is not a valid ObjectId hex string."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid identifier: {value!r}")


class NotFoundError(LookupError):
    """A single-entity lookup matched no document."""

    def __init__(self, collection: str, entity_id: str):
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"No document {entity_id} in {collection}")
