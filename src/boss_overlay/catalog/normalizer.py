"""
Identifier normalization.

Identifiers written by the converter embed a content hash as their last
``_``-separated segment, e.g.::

    ObjectID_Enemy_Level_Lumiere_C_4DFD38854045646F8DC570BDF56675B6

The hash is regenerated whenever the referenced definition is rebuilt, while
the enemy itself stays the same. Dropping it gives a stable identity.
"""

HASH_SEGMENT_LENGTHS = (32, 33)


def normalize_identifier(raw_identifier: str) -> str:
    """Strip a trailing content-hash segment from an identifier.

    Args:
        raw_identifier: Identifier as found in the save or catalog

    Returns:
        Identifier without its last segment when that segment is 32 or 33
        characters long, otherwise the identifier unchanged
    """
    parts = raw_identifier.split("_")
    if len(parts[-1]) in HASH_SEGMENT_LENGTHS:
        return "_".join(parts[:-1])
    return raw_identifier
