import logging
from pathlib import Path
from typing import Optional, Tuple

from statakit.core.config.settings import settings
from statakit.core.common.errors import AutomationDispatchError
from statakit.features.app_session.service.api import open_document_in_stata

from ..domain.models import DoFileTemplate, ScaffoldRequest
from ..data.do_file_writer import LocalDoFileWriter
from ..data.templates import EMPTY_TEMPLATE, TEMPLATES, get_template

logger = logging.getLogger(__name__)


def list_templates() -> Tuple[DoFileTemplate, ...]:
    return TEMPLATES


def create_do_file(file_name: str,
                   directory,
                   template_name: Optional[str] = None,
                   content: Optional[str] = None,
                   open_after: bool = False) -> Path:
    """
    Public Service API: scaffold a new do-file.

    Args:
        file_name: Name with or without the .do extension.
        directory: Existing folder to create it in.
        template_name: One of list_templates(). Ignored when content is given.
        content: Explicit body (e.g. a template the user edited first).
        open_after: Open the new file in Stata once written.

    Returns:
        Path of the created file.

    Raises:
        ValueError: Blank file name or unknown template.
        FileNotFoundError / NotADirectoryError: Bad save location.
        AlreadyExistsError: A file with that name is already there.
    """
    # 1. Resolve the body
    if content is None:
        template = EMPTY_TEMPLATE
        if template_name:
            template = get_template(template_name)
            if template is None:
                raise ValueError(f"Unknown template: {template_name}")
        content = template.render()

    # 2. Validate and write (never overwrites)
    request = ScaffoldRequest(
        file_name=file_name,
        directory=Path(directory).expanduser(),
        content=content,
        extension=settings.DO_FILE_EXTENSION,
    )
    target = request.target_path
    LocalDoFileWriter().write_new(target, request.content)

    # 3. Optionally hand it to Stata; the file stays even if that fails
    if open_after:
        try:
            open_document_in_stata(target)
        except AutomationDispatchError as e:
            logger.warning(f"Created {target.name} but could not open it in Stata: {e}")

    return target
