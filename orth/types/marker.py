from __future__ import annotations


class MarkerType:
    """Quotation delimiter. Only meaningful to the evaluator's capture protocol."""
    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __repr__(self): return "QuoteOpen" if self.text == "{" else "QuoteClose"
    def __str__(self): return self.text

    # Markers are singletons; identity is equality
    def __eq__(self, other):
        return self is other

    def __hash__(self):
        return id(self)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


QuoteOpen = MarkerType("{")
QuoteClose = MarkerType("}")
