"""Default configuration values for llmwire.

Only behavioural switches live here. Wire literals such as `"text"` and
`"json_schema"` are fixed by the API and defined next to the codec.
"""

DEFAULTS: dict[str, bool] = {
    # Encoders created without an explicit sort_keys argument
    "ENCODER_SORT_KEYS": False,
    # Raise WireContractError when the key-sort override does not take effect
    "STRICT_KEY_ORDER": True,
    # Wrap codec calls in OpenTelemetry spans
    "TRACING_ENABLED": True,
}
