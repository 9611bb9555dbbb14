from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from app.viewmodels.editor_vm import EditorVM, UserInputError
from app.viewmodels.reveal_vm import RevealVM
from app.viewmodels.session_vm import SessionVM
from app.views.console_view import (
    render_banner,
    render_findings,
    render_sections,
    render_statistics,
)
from core.services.extraction_service import MetadataExtractor
from infrastructure.image_picker import PillowImagePicker
from infrastructure.logging import init_logging
from infrastructure.platform_service import (
    DeniedLocationProvider,
    LocalFileInfoProvider,
    PlatformDeviceInfoProvider,
    SettingsLocationProvider,
)
from infrastructure.settings import JsonSettings

BASE_DIR = Path(__file__).parent


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show what metadata a photo app can silently harvest from your images."
    )
    parser.add_argument("images", nargs="+", help="Image files to pick")
    parser.add_argument("--prompt", default=None, help="Run the demo edit with this prompt")
    parser.add_argument("--settings", default=None, help="Path to settings.json")
    parser.add_argument("--no-location", action="store_true", help="Deny location permission")
    parser.add_argument("--json", action="store_true", help="Print harvested records as JSON")
    parser.add_argument("--log-dir", default=None, help="Override the log directory")
    return parser.parse_args(argv)


def _load_settings(path: str | None) -> JsonSettings:
    if path:
        return JsonSettings(path)
    default = BASE_DIR / "settings.json"
    return JsonSettings(default) if default.exists() else JsonSettings()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = _load_settings(args.settings)
    init_logging(
        args.log_dir or settings.get("logging.dir"),
        level=str(settings.get("logging.level", "INFO")),
        console=True,
    )

    location = DeniedLocationProvider() if args.no_location else SettingsLocationProvider(settings)
    extractor = MetadataExtractor(
        LocalFileInfoProvider(), PlatformDeviceInfoProvider(settings), location
    )
    session = SessionVM()
    editor = EditorVM(
        session,
        extractor,
        PillowImagePicker(include_exif=bool(settings.get("picker.include_exif", True))),
        processing_delay=float(settings.get("processing.delay_seconds", 2.0)),
    )
    reveal = RevealVM(session)

    print(render_banner())
    status = 0
    for image in args.images:
        try:
            metadata = editor.pick_image(image)
            if args.prompt is not None:
                editor.process_image(args.prompt)
                print(f"\nProcessing Complete! {image} (demo mode, image unchanged)")
        except UserInputError as ex:
            print(f"\n{ex.title}: {ex.message}", file=sys.stderr)
            status = 1
            continue

        if args.json:
            print(json.dumps(metadata.to_dict(), indent=2, default=str))
            continue
        print(f"\n=== {image} ===")
        print(render_sections(reveal.sections()))
        print("\nPrivacy risks:")
        print(render_findings(reveal.findings()))
        if metadata.error:
            print(f"\nPartial extraction: {metadata.error}")

    print("\nSession statistics:")
    print(render_statistics(reveal.statistics()))
    logger.info("Session finished with {} entries", session.entry_count)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
