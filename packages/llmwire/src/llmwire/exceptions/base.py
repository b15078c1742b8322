class LLMWireError(Exception):
    """Base for all llmwire exceptions."""


# ----------------------------------------------------------------------------
# Model identifier errors
# ----------------------------------------------------------------------------
class InvalidModelNameError(LLMWireError, ValueError):
    """A custom model name was empty or not a string."""
