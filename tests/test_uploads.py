import io
import re

from event_hub_api.app.core import uploads
from event_hub_api.app.core.config import settings


def test_generated_name_keeps_extension():
    name = uploads.generate_filename("holiday poster.JPG")
    assert re.fullmatch(r"image-\d+-\d+\.JPG", name)


def test_generated_name_without_extension():
    assert re.fullmatch(r"banner-\d+-\d+", uploads.generate_filename("README", field_name="banner"))


def test_generated_names_differ():
    names = {uploads.generate_filename("a.png") for _ in range(20)}
    assert len(names) == 20


def test_save_and_delete(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "files"))

    url = uploads.save_upload(io.BytesIO(b"data"), "photo.gif")
    assert url.startswith("/uploads/image-")
    stored = tmp_path / "files" / url.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"data"

    uploads.delete_upload(url)
    assert not stored.exists()


def test_delete_ignores_missing_files(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path))
    uploads.delete_upload("/uploads/never-stored.png")
    uploads.delete_upload(None)
