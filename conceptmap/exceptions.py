"""Fatal errors. Everything recoverable goes through Diagnostics instead."""


class ConceptMapError(ValueError):
    pass


class CircularDependencyError(ConceptMapError):
    """Raised when an operation needs an acyclic graph and did not get one."""

    def __init__(self, pending):
        self.pending = frozenset(pending)
        super().__init__(
            f"Concept graph has circular dependencies among {len(self.pending)} "
            f"concepts: {', '.join(sorted(self.pending))}"
        )


class PaletteExhaustedError(ConceptMapError):
    def __init__(self, categories, capacity):
        self.categories = list(categories)
        self.capacity = capacity
        super().__init__(
            f"{len(self.categories)} distinct categories but the palette only has "
            f"{capacity} colors"
        )


class MissingColumnsError(ConceptMapError):
    def __init__(self, missing, suggestions=None):
        self.missing = sorted(missing)
        self.suggestions = dict(suggestions or {})
        msg = f"Missing required column(s): {', '.join(self.missing)}"
        if self.suggestions:
            msg += "\n\nDid you mean:\n"
            for req, sug in self.suggestions.items():
                msg += f"- '{req}' instead of '{sug}'?\n"
        super().__init__(msg)
