from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
import pytest

from fakes import FakeDesktop
from panostitch.config import StitchSettings
from panostitch.io import sources
from panostitch.io.sources import acquire_images
from panostitch.models.acquisition import AcquisitionMode, AcquisitionRequest


def _write_image(path: Path, value: int) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    cv2.imwrite(str(path), np.full((8, 8, 3), value, dtype=np.uint8))
    return str(path)


def test_file_request_loads_every_file_in_order(tmp_path: Path):
    files = [_write_image(tmp_path / f"{index}.png", value) for index, value in enumerate((3, 1, 2))]

    images = acquire_images(AcquisitionRequest.from_files(files), FakeDesktop())

    assert [int(image[0, 0, 0]) for image in images] == [3, 1, 2]


def test_demo_request_reads_dataset_layout(tmp_path: Path):
    _write_image(tmp_path / "example" / "example-00.png", 11)
    _write_image(tmp_path / "example" / "example-01.png", 22)
    settings = StitchSettings(demo_root=str(tmp_path))

    images = acquire_images(AcquisitionRequest.demo(2), FakeDesktop(), settings)

    assert [int(image[0, 0, 0]) for image in images] == [11, 22]


def test_picker_request_uses_selected_files(tmp_path: Path):
    picked = [_write_image(tmp_path / "b.png", 5), _write_image(tmp_path / "a.png", 6)]

    images = acquire_images(AcquisitionRequest.picker(), FakeDesktop(picked=picked))

    assert [int(image[0, 0, 0]) for image in images] == [5, 6]


def test_cancelled_picker_yields_nothing():
    assert acquire_images(AcquisitionRequest.picker(), FakeDesktop(picked=[])) == []


def test_video_request_forwards_frequency(monkeypatch):
    calls: list[tuple[Path, float]] = []

    def fake_sample_video(path: Path, frequency: float):
        calls.append((path, frequency))
        return []

    monkeypatch.setattr(sources, "sample_video", fake_sample_video)
    acquire_images(AcquisitionRequest.video(Path("clip.mp4"), 0.2), FakeDesktop())

    assert calls == [(Path("clip.mp4"), 0.2)]


def test_camera_request_passes_device_index(monkeypatch):
    indices: list[int] = []

    def fake_capture(settings: StitchSettings):
        indices.append(settings.camera_index)
        return []

    monkeypatch.setattr(sources, "capture_from_camera", fake_capture)
    acquire_images(AcquisitionRequest.camera(3), FakeDesktop())

    assert indices == [3]


def test_every_mode_has_a_source():
    assert set(sources.SOURCES) == set(AcquisitionMode)


def test_source_table_is_read_only():
    with pytest.raises(TypeError):
        sources.SOURCES[AcquisitionMode.FILES] = sources.SOURCES[AcquisitionMode.DEMO]
