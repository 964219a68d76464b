"""End-to-end tests for the offline case baker."""

from __future__ import annotations

import json
from pathlib import Path

from PIL import Image

import bake_cases

DEMO_CONFIG = Path(__file__).parent.parent.parent / "examples" / "intersect_demo" / "config.json"


class TestBakeCases:
    def test_default_cases_classify_as_named(self, tmp_path: Path) -> None:
        """Each demo case is named after the category it is meant to show."""
        manifest = bake_cases.bake_cases(output_dir=str(tmp_path))

        assert len(manifest["cases"]) == 10
        for name, case in manifest["cases"].items():
            expected = {"all_in": "totally_in", "all_out": "totally_out"}.get(name, name)
            assert case["category"] == expected

    def test_writes_images_and_manifest(self, tmp_path: Path) -> None:
        bake_cases.bake_cases(str(DEMO_CONFIG), str(tmp_path))

        on_disk = json.loads((tmp_path / "manifest.json").read_text())
        assert on_disk["viewport_size_px"] == [32, 32]
        assert on_disk["cases"]["north_west"]["dest_offset"] == [16, 16]

        with Image.open(tmp_path / "north_west_viewport.png") as img:
            assert img.size == (32, 32)
        with Image.open(tmp_path / "north_west_buffer.png") as img:
            assert img.size == (48, 48)

    def test_tileset_override(self, tmp_path: Path) -> None:
        tileset_path = tmp_path / "tiles.png"
        Image.new("RGB", (128, 128), (10, 200, 30)).save(tileset_path)
        out = tmp_path / "out"

        bake_cases.bake_cases(output_dir=str(out), tileset_path=str(tileset_path))

        with Image.open(out / "all_in_viewport.png") as img:
            assert img.convert("RGB").getpixel((0, 0)) == (10, 200, 30)

    def test_cli_missing_config_fails(self, tmp_path: Path) -> None:
        assert bake_cases.main(["--config", str(tmp_path / "nope.json"), "--output", str(tmp_path)]) == 1

    def test_cli_success(self, tmp_path: Path) -> None:
        assert bake_cases.main(["--output", str(tmp_path)]) == 0
        assert (tmp_path / "manifest.json").exists()
