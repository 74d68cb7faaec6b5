"""Exceptions raised around the transform rules."""


class TransformNotFoundError(LookupError):
    """No rule is registered for a (source, target) block pair."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"no transform registered from {source} to {target}")
