from typing import FrozenSet, Optional

from apps.filegate.exceptions import InvalidGroupListError


def parse_group_list(value: Optional[str]) -> FrozenSet[int]:
    """
    Parse a comma-separated list of group ids.

    Empty tokens and surrounding whitespace are ignored.

    Raises:
        InvalidGroupListError: If a token is not an integer.
    """
    group_ids = set()
    for token in str(value or "").split(","):
        token = token.strip()
        if not token:
            continue
        try:
            group_ids.add(int(token))
        except ValueError:
            raise InvalidGroupListError(value, token) from None
    return frozenset(group_ids)
