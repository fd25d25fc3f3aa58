# src/convene/github_owner.py
"""GitHub owner inference from a Maven-style group coordinate."""

from convene.constants import GITHUB_GROUP_PREFIX, GROUP_UNSPECIFIED


def infer_owner(group: object | None) -> str | None:
    """Infer the GitHub owner from a group like ``io.github.<owner>[.<rest>]``.

    Returns None for a missing, blank or ``unspecified`` group, for groups
    outside the ``io.github.`` convention, and when nothing follows the
    prefix. Never raises.

    >>> infer_owner("io.github.acme.tooling")
    'acme'
    >>> infer_owner("com.example") is None
    True
    """
    if group is None:
        return None

    group_text = str(group).strip()
    if not group_text or group_text == GROUP_UNSPECIFIED:
        return None
    if not group_text.startswith(GITHUB_GROUP_PREFIX):
        return None

    owner, _, _ = group_text[len(GITHUB_GROUP_PREFIX) :].partition(".")
    owner = owner.strip()
    return owner or None
