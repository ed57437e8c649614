"""
Image field: the model holds the path of an image file.

Decoding and scaling happen in an ImageLoader collaborator, off the UI
thread. The loader reports back through callbacks on the UI thread. A path
that cannot be loaded is cleared from the model and the field re-validated,
so a broken image behaves like a missing one instead of failing the form.
"""

import logging
from typing import Any, Iterable, Optional

from pyqt_validated_forms.protocols.element_protocols import ImageLoader
from pyqt_validated_forms.protocols.form_config import get_forms_config
from pyqt_validated_forms.validation.rules import ValidationRule
from .field import LabeledFieldController

logger = logging.getLogger(__name__)


class ImageController(LabeledFieldController):
    """
    Shows a thumbnail of the image whose path is stored in the model.

    display_value is the path ('' when none). `image` holds the last loaded
    thumbnail (whatever the loader produced) or None.
    """

    def __init__(
        self,
        name: str,
        label: Optional[str] = None,
        required: bool = False,
        rules: Optional[Iterable[ValidationRule]] = None,
        image_loader: Optional[ImageLoader] = None,
        thumbnail_size: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(name, label, required, rules, **kwargs)
        self.image_loader = image_loader
        self.thumbnail_size = thumbnail_size or get_forms_config().default_image_size
        self.image: Any = None
        self._loading_path: Optional[str] = None

    def to_display_value(self, value: Any) -> str:
        return "" if value is None else str(value)

    def refresh(self) -> None:
        super().refresh()
        path = self._display_value
        if not path:
            self._loading_path = None
            self._set_image(None)
            return
        if self.image_loader is None:
            logger.debug(f"{self!r}: no image loader; showing path only")
            return
        self._loading_path = path
        self.image_loader.load(
            path,
            self.thumbnail_size,
            self.thumbnail_size,
            on_loaded=lambda image, requested=path: self._on_image_loaded(requested, image),
            on_failed=lambda error, requested=path: self._on_image_failed(requested, error),
        )

    def set_image_path(self, path: Optional[str]) -> None:
        """Store a newly chosen image path and re-validate."""
        self.set_model_value(path or None)
        self.set_needs_validation()

    def image_not_set(self) -> None:
        """The current path could not be shown: clear it and re-validate."""
        self.set_model_value(None)
        self.set_needs_validation()

    def _set_image(self, image: Any) -> None:
        self.image = image
        if self._view is not None:
            self._view.refresh_from(self)

    def _on_image_loaded(self, requested: str, image: Any) -> None:
        if requested != self._loading_path:
            logger.debug(f"{self!r}: stale image result for {requested!r} dropped")
            return
        self._loading_path = None
        self._set_image(image)

    def _on_image_failed(self, requested: str, error: Exception) -> None:
        if requested != self._loading_path:
            logger.debug(f"{self!r}: stale image failure for {requested!r} dropped")
            return
        logger.warning(f"{self!r}: could not load image {requested!r}: {error}")
        self._loading_path = None
        self._set_image(None)
        self.image_not_set()
