import pytest
from conftest import FULL_EXIF, FakeLocation, make_selection

from app.viewmodels.editor_vm import PROMPT_SUGGESTIONS, EditorVM, UserInputError
from app.viewmodels.reveal_vm import RevealVM
from app.viewmodels.session_vm import SessionVM
from app.views.console_view import render_findings, render_sections, render_statistics
from app.views.constants import RISK_COLORS
from core.models import RiskLevel


class StubPicker:
    def __init__(self, exif=FULL_EXIF, error=None):
        self.exif = exif
        self.error = error

    def select(self, path):
        if self.error is not None:
            raise self.error
        return make_selection(exif=self.exif, uri=path)


@pytest.fixture
def editor_setup(make_extractor):
    session = SessionVM()
    delays: list[float] = []
    editor = EditorVM(
        session,
        make_extractor(location=FakeLocation()),
        StubPicker(),
        processing_delay=2.0,
        sleep=delays.append,
    )
    return session, editor, delays


def test_pick_image_records_metadata(editor_setup):
    session, editor, _ = editor_setup
    md = editor.pick_image("file:///a.jpg")
    assert session.current_image == "file:///a.jpg"
    assert session.current_metadata is md
    assert session.entry_count == 1


def test_picker_failure_is_user_error(make_extractor):
    session = SessionVM()
    editor = EditorVM(session, make_extractor(), StubPicker(error=OSError("not an image")))
    with pytest.raises(UserInputError) as exc:
        editor.pick_image("bad.txt")
    assert exc.value.title == "Error"
    assert session.entry_count == 0


def test_process_requires_image(editor_setup):
    _, editor, delays = editor_setup
    with pytest.raises(UserInputError) as exc:
        editor.process_image("Make it black and white")
    assert exc.value.title == "No Image"
    assert delays == []


def test_process_requires_prompt(editor_setup):
    _, editor, _ = editor_setup
    editor.pick_image("file:///a.jpg")
    with pytest.raises(UserInputError) as exc:
        editor.process_image("   ")
    assert exc.value.title == "No Prompt"


def test_process_uses_fixed_delay_and_returns_original(editor_setup):
    session, editor, delays = editor_setup
    editor.pick_image("file:///a.jpg")
    result = editor.process_image(PROMPT_SUGGESTIONS[0])
    assert result == "file:///a.jpg"
    assert session.processed_image == "file:///a.jpg"
    assert delays == [2.0]
    assert editor.is_processing is False


def test_new_pick_resets_processed_image(editor_setup):
    session, editor, _ = editor_setup
    editor.pick_image("file:///a.jpg")
    editor.process_image("Add vintage film effect")
    editor.pick_image("file:///b.jpg")
    assert session.processed_image is None
    assert session.entry_count == 2


def test_reveal_vm_views(editor_setup):
    session, editor, _ = editor_setup
    reveal = RevealVM(session)
    assert reveal.sections() == []
    assert reveal.findings() == []

    editor.pick_image("file:///a.jpg")
    titles = [s.title for s in reveal.sections()]
    assert titles[0] == "Current Location"
    findings = reveal.findings()
    assert findings[0][1] == RISK_COLORS[RiskLevel.HIGH]
    assert reveal.statistics().images_with_location == 1

    text = render_sections(reveal.sections())
    assert "[Camera/Device Info]" in text
    assert "Apple" in text
    assert "Location Tracking" in render_findings(findings)
    assert "Images Processed: 1" in render_statistics(reveal.statistics())

    reveal.clear()
    assert reveal.sections() == []
    assert reveal.statistics().total_images == 0
