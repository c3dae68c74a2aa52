"""
Classifier - semantic file type from raw metadata.

This is the single source of the "type + executable" decision. The mode
renderer derives its type character from classify(), so the printed mode
string and the action offered to the user always agree.
"""

import stat
from typing import Optional

from ..domain.enums import FileClassification
from ..domain.models import MetadataSnapshot, Settings


# Special files offered no action
OTHER_FILE_TYPES = (stat.S_IFIFO, stat.S_IFCHR, stat.S_IFBLK)


def is_user_exec(mode: int, owner_uid: int, owner_gid: int,
                 invoking_uid: int, invoking_gid: int) -> bool:
    """
    Test whether the invoking user may execute a file.

    Only the most specific class applies: the owner bit when the invoking
    user owns the file, else the group bit when the group matches, else
    the other bit.
    """
    if owner_uid == invoking_uid:
        return bool(mode & stat.S_IXUSR)

    if owner_gid == invoking_gid:
        return bool(mode & stat.S_IXGRP)

    return bool(mode & stat.S_IXOTH)


def classify(file_type_bits: int, mode: int, owner_uid: int, owner_gid: int,
             invoking_uid: int, invoking_gid: int) -> FileClassification:
    """
    Classify a path from its metadata. First match wins:
    directory, symlink, other special file, user executable, regular file.

    Args:
        file_type_bits: Raw type bits (a full mode is accepted too)
        mode: Mode whose permission bits are tested for execute access
        owner_uid: Owner user id of the file
        owner_gid: Owner group id of the file
        invoking_uid: User id of the user running the tool
        invoking_gid: Group id of the user running the tool

    Returns:
        The classification; ERROR when nothing matches
    """
    file_type = stat.S_IFMT(file_type_bits)

    if file_type == stat.S_IFDIR:
        return FileClassification.DIRECTORY

    if file_type == stat.S_IFLNK:
        return FileClassification.SYMLINK

    if file_type in OTHER_FILE_TYPES:
        return FileClassification.OTHER

    # Checked before the regular-file test, so e.g. an executable socket
    # lands here as well
    if is_user_exec(mode, owner_uid, owner_gid, invoking_uid, invoking_gid):
        return FileClassification.USER_EXECUTABLE

    if file_type == stat.S_IFREG:
        return FileClassification.REGULAR

    return FileClassification.ERROR


def classify_snapshot(snapshot: MetadataSnapshot,
                      settings: Optional[Settings] = None) -> FileClassification:
    """Classify a metadata snapshot for the invoking user in settings."""
    settings = settings or Settings.from_process()
    return classify(
        snapshot.file_type,
        snapshot.mode,
        snapshot.uid,
        snapshot.gid,
        settings.invoking_uid,
        settings.invoking_gid,
    )
