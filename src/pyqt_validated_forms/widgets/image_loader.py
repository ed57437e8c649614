"""Qt image loader: decode and scale image files on a background thread."""

import logging
from typing import Any, Callable, List

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage

from pyqt_validated_forms.core.background_task import BackgroundTask, BackgroundTaskManager
from pyqt_validated_forms.core.exceptions import ImageLoadError

logger = logging.getLogger(__name__)


def load_scaled_image(path: str, width: int, height: int) -> QImage:
    """
    Decode `path` and scale it to fit width x height, keeping aspect ratio.

    Raises:
        ImageLoadError: the file is missing or not a decodable image
    """
    image = QImage(path)
    if image.isNull():
        raise ImageLoadError(f"Cannot decode image {path!r}")
    return image.scaled(
        width, height,
        Qt.AspectRatioMode.KeepAspectRatio,
        Qt.TransformationMode.SmoothTransformation,
    )


class QtImageLoader:
    """
    ImageLoader backed by BackgroundTask.

    Every request runs on its own task and always reports back, so one
    loader can serve every image field of a form. Callers drop results for
    paths they no longer show. Callbacks run on the thread that called load().
    """

    def __init__(self):
        self._task_manager = BackgroundTaskManager()

    @property
    def tasks(self) -> List[BackgroundTask]:
        return self._task_manager.tasks

    def load(
        self,
        path: str,
        width: int,
        height: int,
        on_loaded: Callable[[Any], None],
        on_failed: Callable[[Exception], None],
    ) -> BackgroundTask:
        logger.debug(f"Loading image {path!r} at {width}x{height}")
        return self._task_manager.run(
            target=load_scaled_image,
            args=(path, width, height),
            on_success=on_loaded,
            on_error=on_failed,
        )

    def cleanup(self) -> None:
        self._task_manager.cleanup()
