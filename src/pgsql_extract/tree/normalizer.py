"""NamespaceKeyNormalizer: strips the dissector namespace from field names.

Protocol-analyzer dumps qualify every field with its dissector namespace,
e.g. ``"pgsql.type"`` or ``"pgsql.length"``.  Inside a picked namespace
object the qualifier is redundant, so it is removed before the key is
pushed onto the builder's pending-key stack:

- ``"pgsql.type"``   -> ``"type"``
- ``"pgsql.length"`` -> ``"length"``
- ``"text"``         -> ``"text"``   (no prefix, passed through)
- ``"tcp.port"``     -> ``"tcp.port"`` (foreign namespace, passed through)
"""


class NamespaceKeyNormalizer:
    """Removes a leading ``"<namespace>."`` from key names.

    Only a single leading occurrence is removed; the rest of the name is
    left untouched.  With ``enabled=False`` every name passes through.

    Example usage:
        normalizer = NamespaceKeyNormalizer("pgsql")
        normalizer.normalize("pgsql.type")   # "type"
        normalizer.normalize("type")         # "type"
    """

    def __init__(self, namespace: str = "pgsql", enabled: bool = True) -> None:
        self._prefix = f"{namespace}."
        self._enabled = enabled

    @property
    def prefix(self) -> str:
        return self._prefix

    def normalize(self, key: str) -> str:
        """Return ``key`` with the namespace prefix removed when present."""
        if self._enabled and key.startswith(self._prefix):
            return key[len(self._prefix) :]
        return key

    __call__ = normalize
