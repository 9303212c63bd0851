# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

"""Hard-link primitives used to publish a new file version.

Every step here may race against another process running the very same
sequence on the same names. A missing source or an already-present
destination therefore means somebody else reached the desired state
first, and is not an error.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def link(old: str, new: str) -> None:
    """Make *new* a hard link to the file behind *old*, replacing *new*.

    ``FileNotFoundError`` from the unlink (nothing to replace) and
    ``FileNotFoundError``/``FileExistsError`` from the link (a concurrent
    process already moved past this state) are treated as success.
    Every other :class:`OSError` propagates.
    """
    try:
        os.unlink(new)
    except FileNotFoundError:
        pass

    try:
        os.link(old, new)
    except (FileNotFoundError, FileExistsError) as exc:
        logger.debug("Link %s -> %s settled concurrently: %s", old, new, exc.strerror)


def safelink(tmpname: str, altname: str, name: str) -> None:
    """Publish *tmpname* under *altname* and then under *name*.

    The shadow is first linked back to the public name in case an earlier
    writer was interrupted between its last two links. Whenever this
    function stops, at least one of *altname* and *name* points to a
    complete version.
    """
    link(altname, name)
    link(tmpname, altname)
    link(altname, name)
