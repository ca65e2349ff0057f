import pytest
from PIL import Image

from icongen.artifacts import EnhancedLogo
from icongen.errors import SourceNotFound, WriteFailure
from icongen.icon_gen import (
    LAUNCHER_SIZES,
    NOTIFICATION_SIZES,
    generate_icons,
    resize_exact,
)

EXPECTED = {
    "mipmap-mdpi": 48, "mipmap-hdpi": 72, "mipmap-xhdpi": 96,
    "mipmap-xxhdpi": 144, "mipmap-xxxhdpi": 192,
    "drawable-mdpi": 24, "drawable-hdpi": 36, "drawable-xhdpi": 48,
    "drawable-xxhdpi": 72, "drawable-xxxhdpi": 96,
}


@pytest.fixture
def enhanced_logo(tmp_path, gradient):
    path = tmp_path / "enhanced_logo.png"
    gradient((640, 480), mode="RGBA").save(path)
    return EnhancedLogo(path, (640, 480))


def test_catalogs():
    assert dict(LAUNCHER_SIZES) == {"mdpi": 48, "hdpi": 72, "xhdpi": 96, "xxhdpi": 144, "xxxhdpi": 192}
    assert dict(NOTIFICATION_SIZES) == {"mdpi": 24, "hdpi": 36, "xhdpi": 48, "xxhdpi": 72, "xxxhdpi": 96}


def test_resize_is_exact_fit(gradient):
    assert resize_exact(gradient((300, 100)), 96).size == (96, 96)


def test_resize_averages_area():
    img = Image.new("L", (2, 1))
    img.putdata([0, 200])
    assert resize_exact(img, 1).getpixel((0, 0)) == 100


def test_generates_full_matrix(enhanced_logo, tmp_path):
    res = tmp_path / "res"

    artifacts = generate_icons(enhanced_logo, res)

    assert len(artifacts) == 15
    assert sorted(p.name for p in res.iterdir()) == sorted(EXPECTED)
    for folder, size in EXPECTED.items():
        names = ["ic_notification.png"] if folder.startswith("drawable") else ["ic_launcher.png", "ic_launcher_round.png"]
        assert sorted(p.name for p in (res / folder).iterdir()) == names
        for name in names:
            with Image.open(res / folder / name) as img:
                assert img.size == (size, size)


def test_artifacts_report_bucket_and_kind(enhanced_logo, tmp_path):
    artifacts = generate_icons(enhanced_logo, tmp_path / "res")

    kinds = [a.kind for a in artifacts]
    assert kinds.count("launcher") == 5
    assert kinds.count("launcher_round") == 5
    assert kinds.count("notification") == 5
    for a in artifacts:
        assert a.size == (dict(LAUNCHER_SIZES if a.kind != "notification" else NOTIFICATION_SIZES)[a.bucket],) * 2


def test_round_launcher_is_byte_identical(enhanced_logo, tmp_path):
    res = tmp_path / "res"
    generate_icons(enhanced_logo, res)

    for bucket in LAUNCHER_SIZES:
        folder = res / f"mipmap-{bucket.name}"
        assert (folder / "ic_launcher.png").read_bytes() == (folder / "ic_launcher_round.png").read_bytes()


def test_accepts_plain_path(enhanced_logo, tmp_path):
    assert len(generate_icons(enhanced_logo.path, tmp_path / "res")) == 15


def test_existing_directories_are_reused(enhanced_logo, tmp_path):
    res = tmp_path / "res"
    (res / "mipmap-hdpi").mkdir(parents=True)

    assert len(generate_icons(enhanced_logo, res)) == 15


def test_missing_enhanced_logo(tmp_path):
    with pytest.raises(SourceNotFound):
        generate_icons(tmp_path / "enhanced_logo.png", tmp_path / "res")
    assert not (tmp_path / "res").exists()


def test_undecodable_enhanced_logo(tmp_path):
    path = tmp_path / "enhanced_logo.png"
    path.write_bytes(b"\x89PNG broken")

    with pytest.raises(SourceNotFound):
        generate_icons(path, tmp_path / "res")


def test_bucket_failure_aborts_remaining(enhanced_logo, tmp_path):
    res = tmp_path / "res"
    res.mkdir()
    # a file where the xhdpi launcher directory should go
    (res / "mipmap-xhdpi").write_text("in the way")

    with pytest.raises(WriteFailure):
        generate_icons(enhanced_logo, res)

    assert (res / "mipmap-hdpi" / "ic_launcher_round.png").exists()
    assert not (res / "mipmap-xxhdpi").exists()
    assert not (res / "drawable-mdpi").exists()


def test_unwritable_icon_file_is_write_failure(enhanced_logo, tmp_path):
    res = tmp_path / "res"
    # a directory where ic_launcher.png should be written
    (res / "mipmap-mdpi" / "ic_launcher.png").mkdir(parents=True)

    with pytest.raises(WriteFailure) as exc:
        generate_icons(enhanced_logo, res)

    assert exc.value.path == res / "mipmap-mdpi" / "ic_launcher.png"
    assert not (res / "mipmap-mdpi" / "ic_launcher_round.png").exists()
    assert not (res / "mipmap-hdpi").exists()
