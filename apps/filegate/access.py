"""Access policy for protected files.

A file is accessible when it lives in the processing folder, or when it is
visible and either unrestricted or restricted to at least one of the
requester's groups.
"""

from apps.filegate.storage.base import FileRecord
from core.auth.identity import FrontendIdentity


def is_file_accessible(file: FileRecord, identity: FrontendIdentity) -> bool:
    """Checks whether a given file is accessible by the requester."""
    # Derivatives are expected to be served by the web server directly
    if file.storage.is_within_processing_folder(file.identifier):
        return True

    if not file.visible:
        return False

    # Unrestricted only when no group list is set; a list without ids admits nobody
    if not file.fe_groups:
        return True

    return not file.access_groups.isdisjoint(identity.group_ids)
