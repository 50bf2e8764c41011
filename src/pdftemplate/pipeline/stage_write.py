"""Write Stage - resolve the output path and persist PDF bytes.

Writing under another identity needs an operating-system specific
capability, so it is injected as a writer callable. The default writer
only writes as the current process user.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from pdftemplate.errors import (
    CredentialFormatError,
    OutputExistsError,
    UnsupportedIdentityError,
)
from pdftemplate.models import Credentials, FileExistsAction

logger = logging.getLogger(__name__)

# (data, path, identity) -> None
FileWriter = Callable[[bytes, Path, Optional[Credentials]], None]


def resolve_output_path(directory: str, file_name: str, action: FileExistsAction) -> Path:
    """Apply the file-exists policy to a destination.

    Rename appends "_(N)" to the stem, N counting up from 1 until a free
    name is found: report.pdf, report_(1).pdf, report_(2).pdf, ...

    Raises:
        OutputExistsError: The file exists and the policy is Error
    """
    path = Path(directory) / file_name
    if not path.exists():
        return path

    if action == FileExistsAction.ERROR:
        raise OutputExistsError(path)
    if action == FileExistsAction.OVERWRITE:
        logger.debug("Overwriting %s", path)
        return path

    index = 1
    while True:
        candidate = path.with_name(f"{path.stem}_({index}){path.suffix}")
        if not candidate.exists():
            logger.debug("%s exists, renamed to %s", path.name, candidate.name)
            return candidate
        index += 1


def parse_credentials(user_name: Optional[str], password: Optional[str]) -> Credentials:
    """Split a "domain\\username" user name.

    Raises:
        CredentialFormatError: Not exactly one backslash separating two parts
    """
    parts = (user_name or "").split("\\")
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise CredentialFormatError(
            f"UserName field has to be in the form of domain\\username, got {user_name!r}."
        )
    return Credentials(domain=parts[0], user_name=parts[1], password=password)


def write_file(data: bytes, path: Path, identity: Optional[Credentials] = None) -> None:
    """Write bytes to path, creating the directory if needed.

    Raises:
        UnsupportedIdentityError: An identity was given; use an identity-capable writer
    """
    if identity is not None:
        raise UnsupportedIdentityError(
            f"Cannot write as {identity.domain}\\{identity.user_name}: "
            "no identity-capable writer was provided."
        )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info("Wrote %s (%d bytes)", path, len(data))
