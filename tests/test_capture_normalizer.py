from conftest import FULL_EXIF, make_selection

from core.models import NOT_AVAILABLE, ExifData
from core.services.capture_normalizer import (
    EXIF_FIELDS,
    format_kilobytes,
    normalize_exif,
    normalize_file_info,
    normalize_selection,
)
from core.services.interfaces import RawFileInfo, SelectionResult


def test_format_kilobytes_two_decimals():
    assert format_kilobytes(2048) == "2.00 KB"
    assert format_kilobytes(0) == "0.00 KB"
    assert format_kilobytes(1536) == "1.50 KB"
    assert format_kilobytes(None) == "Unknown"


def test_missing_exif_block_is_omitted():
    extracted = normalize_selection(make_selection(exif=None))
    assert extracted.exif is None


def test_empty_exif_block_yields_all_sentinel_fields():
    exif = normalize_exif({})
    assert isinstance(exif, ExifData)
    for name, _sources in EXIF_FIELDS:
        assert getattr(exif, name) == NOT_AVAILABLE


def test_each_missing_tag_maps_to_sentinel():
    for name, sources in EXIF_FIELDS:
        raw = {k: v for k, v in FULL_EXIF.items() if k not in sources}
        exif = normalize_exif(raw)
        assert getattr(exif, name) == NOT_AVAILABLE, name


def test_fallback_source_keys_are_used_in_order():
    exif = normalize_exif(
        {"DateTimeOriginal": "2023:01:01 00:00:00", "ApertureValue": 2.8, "ISO": 200}
    )
    assert exif.date_time == "2023:01:01 00:00:00"
    assert exif.aperture == "2.8"
    assert exif.iso == "200"

    preferred = normalize_exif(
        {
            "DateTime": "2024:02:02 02:02:02",
            "DateTimeOriginal": "2023:01:01 00:00:00",
            "FNumber": 1.8,
            "ApertureValue": 2.8,
        }
    )
    assert preferred.date_time == "2024:02:02 02:02:02"
    assert preferred.aperture == "1.8"


def test_empty_string_tag_counts_as_absent_but_zero_is_kept():
    exif = normalize_exif({"Make": "", "Flash": 0})
    assert exif.make == NOT_AVAILABLE
    assert exif.flash == "0"


def test_selection_fallbacks():
    extracted = normalize_selection(SelectionResult(uri="file:///x.jpg"))
    assert extracted.width is None
    assert extracted.height is None
    assert extracted.type == "image"
    assert extracted.file_name == "Unknown"
    assert extracted.mime_type == "Unknown"
    assert extracted.file_size == "Unknown"
    assert extracted.exif is None


def test_full_selection_is_normalized():
    extracted = normalize_selection(make_selection(exif=FULL_EXIF))
    assert extracted.width == 4032
    assert extracted.file_size == "2.00 KB"
    assert extracted.exif.make == "Apple"
    assert extracted.exif.gps_latitude == "40.689247"


def test_selection_from_picker_payload():
    selection = SelectionResult.from_dict(
        {"uri": "file:///a.jpg", "width": 10, "height": 20, "fileName": "a.jpg", "fileSize": 1024}
    )
    extracted = normalize_selection(selection)
    assert extracted.file_name == "a.jpg"
    assert extracted.file_size == "1.00 KB"
    assert extracted.mime_type == "Unknown"


def test_file_info_normalization():
    info = normalize_file_info("file:///a.jpg", RawFileInfo.from_dict({"exists": True, "size": 0}))
    assert info.size == "0.00 KB"
    assert info.exists is True
    assert info.is_directory is False

    missing = normalize_file_info("file:///b.jpg", RawFileInfo(exists=False))
    assert missing.size == "Unknown"
