"""Tests for custom pattern storage."""

import uuid
import pytest
import yaml

from sand_patterns.api.base.exceptions import ValidationError
from sand_patterns.api.pattern.exceptions import PatternNotFoundError
from sand_patterns.api.pattern.models import SaveCustomPatternRequest, TrackFlavor, PatternConfig
from sand_patterns.api.pattern.services.custom_pattern_service import CustomPatternService


def save_request(data, name="My Pattern", **kwargs):
    return SaveCustomPatternRequest(name=name, theta_rho_data=data, **kwargs)


class TestSavePattern:
    """Test saving custom patterns."""

    @pytest.mark.asyncio
    async def test_save(self, custom_service, thr_data):
        """Test a valid pattern is stored with its metadata."""
        pattern = await custom_service.save_pattern(
            save_request(thr_data, preview_svg="<svg></svg>", created_by="tester")
        )
        assert uuid.UUID(pattern.id).version == 4
        assert pattern.name == "My Pattern"
        assert pattern.point_count == 243
        assert pattern.flavor == TrackFlavor.CENTER_TO_CENTER
        assert pattern.created_by == "tester"
        assert pattern.has_preview

        custom_dir = custom_service.custom_dir
        assert (custom_dir / f"{pattern.id}.thr").read_text(encoding="utf-8") == thr_data
        assert (custom_dir / f"{pattern.id}.svg").exists()
        with open(custom_dir / f"{pattern.id}.yaml", encoding="utf-8") as f:
            record = yaml.safe_load(f)
        assert record["pattern"]["id"] == pattern.id
        assert record["pattern"]["point_count"] == 243

    @pytest.mark.asyncio
    async def test_invalid_data(self, custom_service):
        """Test invalid theta-rho text is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            await custom_service.save_pattern(save_request("0.0 0.0\n1.5708 2.0"))
        assert exc_info.value.message == "Invalid pattern: Rho value must be 0-1, got 2.0 at line 2"
        assert list(custom_service.custom_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_missing_data(self, custom_service):
        """Test empty data is rejected before the name is checked."""
        with pytest.raises(ValidationError) as exc_info:
            await custom_service.save_pattern(save_request("", name=""))
        assert exc_info.value.message == "Invalid pattern: Pattern data is required"

    @pytest.mark.asyncio
    async def test_blank_name(self, custom_service, thr_data):
        """Test a blank name is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            await custom_service.save_pattern(save_request(thr_data, name="   "))
        assert exc_info.value.message == "Pattern name is required"

    @pytest.mark.asyncio
    async def test_name_trimmed_and_truncated(self, custom_service, thr_data):
        """Test names are stripped and cut to 100 characters."""
        pattern = await custom_service.save_pattern(save_request(thr_data, name="  " + "x" * 150))
        assert pattern.name == "x" * 100
        assert not pattern.has_preview
        assert await custom_service.get_preview(pattern.id) is None


class TestQueries:
    """Test reading and deleting custom patterns."""

    @pytest.mark.asyncio
    async def test_list_newest_first(self, custom_service, thr_data):
        """Test listing sorts by creation time."""
        first = await custom_service.save_pattern(save_request(thr_data, name="First"))
        second = await custom_service.save_pattern(save_request(thr_data, name="Second"))
        patterns = await custom_service.list_patterns()
        assert {p.id for p in patterns} == {first.id, second.id}
        assert [p.created_at for p in patterns] == sorted((p.created_at for p in patterns), reverse=True)

    @pytest.mark.asyncio
    async def test_get_data_and_preview(self, custom_service, thr_data):
        """Test stored files are returned unchanged."""
        pattern = await custom_service.save_pattern(save_request(thr_data, preview_svg="<svg>p</svg>"))
        assert await custom_service.get_pattern_data(pattern.id) == thr_data
        assert await custom_service.get_preview(pattern.id) == "<svg>p</svg>"
        assert (await custom_service.get_pattern(pattern.id)).name == "My Pattern"

    @pytest.mark.asyncio
    async def test_delete(self, custom_service, thr_data):
        """Test deleting removes record and files."""
        pattern = await custom_service.save_pattern(save_request(thr_data, preview_svg="<svg></svg>"))
        await custom_service.delete_pattern(pattern.id)
        assert list(custom_service.custom_dir.iterdir()) == []
        with pytest.raises(PatternNotFoundError):
            await custom_service.get_pattern(pattern.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("pattern_id", ["missing", "../config/pattern"])
    async def test_unknown_id(self, custom_service, pattern_id):
        """Test unknown ids never reach the filesystem."""
        with pytest.raises(PatternNotFoundError):
            await custom_service.get_pattern_data(pattern_id)
        with pytest.raises(PatternNotFoundError):
            await custom_service.delete_pattern(pattern_id)


class TestPersistence:
    """Test reloading stored patterns."""

    @pytest.mark.asyncio
    async def test_reload(self, service_config, custom_service, thr_data, circle_config):
        """Test saved patterns survive a restart."""
        saved = await custom_service.save_pattern(save_request(thr_data, config=circle_config))
        await custom_service.stop()

        service = CustomPatternService(service_config)
        await service.initialize()
        await service.start()
        loaded = await service.get_pattern(saved.id)
        assert loaded == saved
        assert isinstance(loaded.config, PatternConfig)
        assert loaded.config.loops == 3
        await service.stop()

    @pytest.mark.asyncio
    async def test_broken_records_reported(self, service_config, custom_service, thr_data):
        """Test unreadable records are skipped and reported."""
        saved = await custom_service.save_pattern(save_request(thr_data))
        await custom_service.stop()
        (custom_service.custom_dir / "orphan.yaml").write_text("pattern: {}\n", encoding="utf-8")
        (custom_service.custom_dir / f"{saved.id}.thr").unlink()

        service = CustomPatternService(service_config)
        await service.initialize()
        await service.start()
        assert await service.list_patterns() == []

        health = await service.health()
        assert health.status == "ok"
        error = health.components["failed_patterns"].error
        assert "orphan.yaml" in error
        assert f"{saved.id}.yaml" in error
        await service.stop()
