"""
Exceptions raised by the query pipeline.

Only configuration-shape problems are raised. Data irregularities (missing
fields, non-numeric values, unparseable or inverted filter dates) never
raise; they exclude the record or yield a null aggregate instead.
"""


class QueryPipelineError(Exception):
    """Base class for pipeline errors."""


class InputTypeError(QueryPipelineError):
    """Raised when the record collection or required options have the wrong shape."""


class ConfigurationError(QueryPipelineError):
    """Raised for unknown enumeration values or invalid engine arguments."""
