"""Car-part tree and browser, a parts-file editor, a quiz and a fuel-system model."""

__version__ = "0.1.0"
__all__ = ["car", "carpart", "editor", "fuel", "infographics", "quiz", "quizbank"]