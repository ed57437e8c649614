"""Tests for the PyQt6 rendering layer."""

import time

import pytest


@pytest.fixture
def rendered_form(qapp, person):
    """A person form rendered into a FormView."""
    from pyqt_validated_forms import (
        CheckBoxController, EditTextController, FormController,
        FormSectionController, SelectionController,
    )
    from pyqt_validated_forms.widgets import FormView, QtViewFactory
    from pyqt_validated_forms.core.view_ids import ViewIdAllocator

    form = FormController(person)
    main = form.add_section(FormSectionController("main", "Person"))
    main.add_element(EditTextController("name", required=True, placeholder="Full name"))
    main.add_element(EditTextController("age"))
    main.add_element(CheckBoxController("subscribed"))
    main.add_element(SelectionController("email", options=[("Work", "w@x.org"), ("Home", "h@x.org")]))

    container = FormView()
    form.recreate_views(container, QtViewFactory(allocator=ViewIdAllocator(seed=10)))
    return form, container


class TestAdapters:
    """Test widget adapters implement the widget ABCs."""

    def test_line_edit_adapter(self, qapp):
        """Test LineEditAdapter returns raw text."""
        from pyqt_validated_forms.widgets import LineEditAdapter
        from pyqt_validated_forms.protocols import ValueGettable, ValueSettable

        widget = LineEditAdapter()
        assert isinstance(widget, ValueGettable)
        assert isinstance(widget, ValueSettable)

        widget.set_value(12)
        assert widget.get_value() == "12"
        widget.set_value(None)
        assert widget.get_value() == ""

    def test_checkbox_adapter(self, qapp):
        """Test CheckBoxAdapter treats None as unchecked."""
        from pyqt_validated_forms.widgets import CheckBoxAdapter

        widget = CheckBoxAdapter()
        widget.set_value(True)
        assert widget.get_value() is True
        widget.set_value(None)
        assert widget.get_value() is False

    def test_combo_box_adapter(self, qapp):
        """Test ComboBoxAdapter works on indexes."""
        from pyqt_validated_forms.widgets import ComboBoxAdapter

        widget = ComboBoxAdapter()
        widget.populate(["a", "b"])
        assert widget.get_value() == -1
        widget.set_value(1)
        assert widget.get_value() == 1
        widget.set_value(7)
        assert widget.get_value() == -1


class TestSignalService:
    """Test programmatic updates are not echoed as input."""

    def test_update_widget_value_blocks_signals(self, qapp):
        """Test update_widget_value does not emit change signals."""
        from pyqt_validated_forms.services.signal_service import SignalService
        from pyqt_validated_forms.widgets import LineEditAdapter

        widget = LineEditAdapter()
        seen = []
        widget.connect_change_signal(seen.append)

        SignalService.update_widget_value(widget, "quiet")
        assert widget.get_value() == "quiet"
        assert seen == []
        assert widget.signalsBlocked() is False

    def test_update_widget_value_rejects_plain_widgets(self, qapp):
        """Test non-ValueSettable widgets need an explicit setter."""
        from PyQt6.QtWidgets import QLabel
        from pyqt_validated_forms.services.signal_service import SignalService

        label = QLabel()
        with pytest.raises(ValueError):
            SignalService.update_widget_value(label, "x")

        SignalService.update_widget_value(label, "x", setter=lambda w, v: w.setText(v))
        assert label.text() == "x"


class TestViewFactory:
    """Test QtViewFactory."""

    def test_views_rendered_in_order_with_ids(self, rendered_form):
        """Test every element gets a view with a fresh id."""
        from pyqt_validated_forms.widgets import CheckBoxView, EditTextView, SectionHeaderView, SelectionView

        form, container = rendered_form
        views = container.views

        assert [type(v) for v in views] == [
            SectionHeaderView, EditTextView, EditTextView, CheckBoxView, SelectionView,
        ]
        assert [v.view_id for v in views] == [10, 11, 12, 13, 14]
        assert views[1].objectName() == "name_11"
        assert views[0].title_label.text() == "Person"
        assert views[1].label.text() == "Name *:"
        assert views[1].input_widget.placeholderText() == "Full name"

    def test_unregistered_controller(self, qapp):
        """Test unknown controller types raise ViewNotRegisteredError."""
        from pyqt_validated_forms import LabeledFieldController
        from pyqt_validated_forms.core.exceptions import ViewNotRegisteredError
        from pyqt_validated_forms.widgets import QtViewFactory

        class RatingController(LabeledFieldController):
            pass

        factory = QtViewFactory()
        with pytest.raises(ViewNotRegisteredError):
            factory.create_view(RatingController("rating"))

    def test_register_view_and_subclass_lookup(self, qapp):
        """Test registered views win and subclasses fall back along the MRO."""
        from pyqt_validated_forms import EditTextController
        from pyqt_validated_forms.widgets import EditTextView, QtViewFactory

        class EmailController(EditTextController):
            pass

        class EmailView(EditTextView):
            pass

        factory = QtViewFactory()
        assert factory.view_type_for(EmailController("email")) is EditTextView

        factory.register_view(EmailController, EmailView)
        assert isinstance(factory.create_view(EmailController("email")), EmailView)

    def test_color_scheme_applied(self, qapp):
        """Test views use the configured colors."""
        from pyqt_validated_forms import EditTextController
        from pyqt_validated_forms.theming import FormColorScheme
        from pyqt_validated_forms.widgets import QtViewFactory

        scheme = FormColorScheme(error_color=(255, 0, 0))
        view = QtViewFactory(color_scheme=scheme).create_view(EditTextController("name"))
        assert "#ff0000" in view.error_label.styleSheet()


class TestFieldViews:
    """Test views and controllers working together."""

    def test_model_values_shown_in_widgets(self, qapp, person):
        """Test rendered widgets start from the model values."""
        from pyqt_validated_forms import EditTextController, FormController, FormSectionController
        from pyqt_validated_forms.widgets import FormView, QtViewFactory

        person.name = "Ada"
        person.age = 36
        form = FormController(person)
        section = form.add_section(FormSectionController("main"))
        section.add_element(EditTextController("name"))
        section.add_element(EditTextController("age"))

        container = FormView()
        form.recreate_views(container, QtViewFactory())

        assert container.views[1].input_widget.text() == "Ada"
        assert container.views[2].input_widget.text() == "36"

    def test_typing_writes_model(self, rendered_form, person):
        """Test text input is coerced and written to the model."""
        form, container = rendered_form
        age_view = container.views[2]

        age_view.input_widget.setText("42")

        assert person.age == 42
        assert age_view.input_widget.text() == "42"

    def test_invalid_text_reported_on_validation(self, rendered_form, person):
        """Test unconvertible text leaves the model and shows an error."""
        form, container = rendered_form
        person.name = "Ada"
        age_view = container.views[2]

        age_view.input_widget.setText("forty")
        form.show_validation_errors()

        assert person.age is None
        assert age_view.error_text == "Age must be a valid whole number"
        assert age_view.input_widget.text() == "forty"

    def test_model_change_updates_widget(self, rendered_form):
        """Test a model write is pushed into the widget without echo."""
        form, container = rendered_form
        events = []
        form.get_model().subscribe(events.append)

        form.get_model().set_value("name", "Grace")

        assert container.views[1].input_widget.text() == "Grace"
        assert len(events) == 1

    def test_checkbox_and_selection_input(self, rendered_form, person):
        """Test check box and combo box write model values."""
        form, container = rendered_form

        container.views[3].input_widget.setChecked(True)
        container.views[4].input_widget.setCurrentIndex(1)

        assert person.subscribed is True
        assert person.email == "h@x.org"

    def test_error_label_follows_validation(self, rendered_form, person):
        """Test show/reset validation errors toggle the error line."""
        form, container = rendered_form
        name_view = container.views[1]

        form.show_validation_errors()
        assert name_view.error_text == "Name is required"

        form.reset_validation_errors()
        assert name_view.error_text is None

    def test_recreate_views_replaces_widgets(self, rendered_form):
        """Test rebuilding clears the container and keeps one listener."""
        from pyqt_validated_forms.widgets import QtViewFactory

        form, container = rendered_form
        old_views = container.views

        form.recreate_views(container, QtViewFactory())

        assert len(container.views) == len(old_views)
        assert not set(map(id, container.views)) & set(map(id, old_views))
        assert form.get_model().listener_count == 1


class TestImages:
    """Test image loading and display."""

    @staticmethod
    def _write_png(path, width, height):
        from PyQt6.QtCore import Qt
        from PyQt6.QtGui import QImage

        image = QImage(width, height, QImage.Format.Format_RGB32)
        image.fill(Qt.GlobalColor.red)
        assert image.save(str(path), "PNG")
        return str(path)

    def test_load_scaled_image_keeps_aspect_ratio(self, qapp, tmp_path):
        """Test images are scaled to fit the requested box."""
        from pyqt_validated_forms.widgets import load_scaled_image

        path = self._write_png(tmp_path / "wide.png", 40, 20)
        image = load_scaled_image(path, 10, 10)

        assert (image.width(), image.height()) == (10, 5)

    def test_load_scaled_image_rejects_bad_file(self, qapp, tmp_path):
        """Test undecodable files raise ImageLoadError."""
        from pyqt_validated_forms.core.exceptions import ImageLoadError
        from pyqt_validated_forms.widgets import load_scaled_image

        bad = tmp_path / "bad.png"
        bad.write_bytes(b"not an image")
        with pytest.raises(ImageLoadError):
            load_scaled_image(str(bad), 10, 10)
        with pytest.raises(ImageLoadError):
            load_scaled_image(str(tmp_path / "missing.png"), 10, 10)

    def test_image_view_shows_loaded_thumbnail(self, qapp, person):
        """Test ImageView displays the controller's image."""
        from PyQt6.QtGui import QImage
        from pyqt_validated_forms import FormController, FormSectionController, ImageController
        from pyqt_validated_forms.widgets import FormView, QtViewFactory

        class InstantLoader:
            def load(self, path, width, height, on_loaded, on_failed):
                on_loaded(QImage(width, height, QImage.Format.Format_RGB32))

        person.photo = "cat.png"
        form = FormController(person)
        section = form.add_section(FormSectionController("media"))
        section.add_element(ImageController("photo", thumbnail_size=16, image_loader=InstantLoader()))

        container = FormView()
        form.recreate_views(container, QtViewFactory())
        view = container.views[1]

        assert view.has_image
        assert view.image_label.pixmap().width() == 16

        form.get_model().set_value("photo", None)
        assert not view.has_image

    def test_factory_provides_image_loader(self, qapp):
        """Test image controllers without a loader get the factory's."""
        from pyqt_validated_forms import ImageController
        from pyqt_validated_forms.widgets import QtImageLoader, QtViewFactory

        controller = ImageController("photo")
        QtViewFactory().create_view(controller)
        assert isinstance(controller.image_loader, QtImageLoader)

    @staticmethod
    def _pump_until(qapp, condition, timeout=5.0):
        deadline = time.monotonic() + timeout
        while not condition() and time.monotonic() < deadline:
            qapp.processEvents()
            time.sleep(0.01)

    def test_qt_image_loader_reports_back(self, qapp, tmp_path):
        """Test QtImageLoader decodes off the UI thread and calls back."""
        from pyqt_validated_forms.widgets import QtImageLoader

        path = self._write_png(tmp_path / "square.png", 30, 30)
        loader = QtImageLoader()
        loaded, failed = [], []

        task = loader.load(path, 15, 15, loaded.append, failed.append)
        assert task.wait(5000)
        self._pump_until(qapp, lambda: loaded or failed)
        loader.cleanup()

        assert failed == []
        assert loaded[0].width() == 15

    def test_qt_image_loader_serves_concurrent_requests(self, qapp, tmp_path):
        """Test a second request does not cancel the first."""
        from pyqt_validated_forms.widgets import QtImageLoader

        first = self._write_png(tmp_path / "first.png", 30, 30)
        loader = QtImageLoader()
        results = []

        loader.load(first, 10, 10, lambda image: results.append(("first", image.width())), results.append)
        loader.load(str(tmp_path / "missing.png"), 10, 10,
                    lambda image: results.append(("missing", image)),
                    lambda error: results.append(("missing", type(error).__name__)))
        for task in loader.tasks:
            assert task.wait(5000)
        self._pump_until(qapp, lambda: len(results) >= 2)
        loader.cleanup()

        assert sorted(results) == [("first", 10), ("missing", "ImageLoadError")]

    def test_every_image_field_loads_its_image(self, qapp, tmp_path):
        """Test several image fields on one form all receive their thumbnails."""
        from dataclasses import dataclass
        from typing import Optional
        from pyqt_validated_forms import FormController, FormSectionController, ImageController
        from pyqt_validated_forms.widgets import FormView, QtViewFactory

        @dataclass
        class IdCard:
            front: Optional[str] = None
            back: Optional[str] = None

        card = IdCard(
            front=self._write_png(tmp_path / "front.png", 30, 30),
            back=self._write_png(tmp_path / "back.png", 30, 30),
        )
        form = FormController(card)
        section = form.add_section(FormSectionController("scans"))
        front = section.add_element(ImageController("front", thumbnail_size=20))
        back = section.add_element(ImageController("back", thumbnail_size=20))

        container = FormView()
        factory = QtViewFactory()
        form.recreate_views(container, factory)
        self._pump_until(qapp, lambda: front.image is not None and back.image is not None)
        front.image_loader.cleanup()

        assert front.image_loader is back.image_loader
        assert front.image is not None and back.image is not None
        assert container.views[1].has_image
        assert container.views[2].has_image
        assert card.front is not None and card.back is not None
