"""Unit tests for the IOLayer."""

import pytest
from unittest.mock import Mock, PropertyMock, patch
from git.exc import InvalidGitRepositoryError

from image_tag_deriver.exceptions import ConfigurationError
from image_tag_deriver.io_layer import IOLayer
from image_tag_deriver.models import DeriveResult, RefInfo


class TestReadYaml:
    """Test reading the YAML config file."""

    def test_read_existing(self, config_yaml):
        data = IOLayer().read_yaml(str(config_yaml["config_file"]))
        assert data == config_yaml["data"]

    def test_missing_file(self, tmp_path):
        assert IOLayer().read_yaml(str(tmp_path / "missing.yaml")) is None

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert IOLayer().read_yaml(str(config_file)) == {}

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("image: [app\n")
        with pytest.raises(ConfigurationError):
            IOLayer().read_yaml(str(config_file))

    def test_unreadable_path(self, tmp_path):
        config_dir = tmp_path / "configdir"
        config_dir.mkdir()
        with pytest.raises(ConfigurationError) as exc_info:
            IOLayer().read_yaml(str(config_dir))
        assert "Failed to read" in str(exc_info.value)

    def test_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- app\n- other\n")
        with pytest.raises(ConfigurationError) as exc_info:
            IOLayer().read_yaml(str(config_file))
        assert "must contain a mapping" in str(exc_info.value)


class TestWriteOutputs:
    """Test writing the GitHub Actions output file."""

    def test_appends_outputs(self, tmp_path):
        output_file = tmp_path / "output"
        output_file.write_text("previous=1\n")
        result = DeriveResult(tags=["app:1.2.3", "app:1.2"], version="1.2.3")

        assert IOLayer().write_outputs(result, str(output_file)) is True
        assert output_file.read_text() == "previous=1\ntags=app:1.2.3,app:1.2\nversion=1.2.3\n"

    def test_empty_version(self, tmp_path):
        output_file = tmp_path / "output"
        IOLayer().write_outputs(DeriveResult(tags=["app:latest"]), str(output_file))
        assert output_file.read_text() == "tags=app:latest\nversion=\n"

    def test_dry_run(self, tmp_path, capsys):
        output_file = tmp_path / "output"
        assert IOLayer(dry_run=True).write_outputs(DeriveResult(tags=["app:latest"]), str(output_file)) is False
        assert not output_file.exists()
        assert "[DRY RUN] Would write outputs" in capsys.readouterr().out


class TestResolveGitRef:
    """Test resolving ref and sha from a local checkout."""

    @pytest.fixture
    def mock_repo(self):
        """Create a mock Git repository on branch feature/x."""
        repo = Mock()
        repo.head.commit.hexsha = "abcdef1234567890"
        repo.head.is_detached = False
        repo.active_branch.name = "feature/x"
        return repo

    def test_branch(self, mock_repo):
        with patch("image_tag_deriver.io_layer.Repo", return_value=mock_repo):
            result = IOLayer().resolve_git_ref()
        assert result == RefInfo("refs/heads/feature/x", "abcdef1234567890")

    def test_detached_head_on_tag(self, mock_repo):
        mock_repo.head.is_detached = True
        tag = Mock()
        tag.name = "v1.2.3"
        tag.commit = mock_repo.head.commit
        mock_repo.tags = [tag]

        with patch("image_tag_deriver.io_layer.Repo", return_value=mock_repo):
            result = IOLayer().resolve_git_ref()
        assert result == RefInfo("refs/tags/v1.2.3", "abcdef1234567890")

    def test_detached_head_without_tag(self, mock_repo):
        mock_repo.head.is_detached = True
        mock_repo.tags = []

        with patch("image_tag_deriver.io_layer.Repo", return_value=mock_repo):
            result = IOLayer().resolve_git_ref()
        assert result == RefInfo("", "abcdef1234567890")

    def test_detached_head_skips_tree_tag(self, mock_repo):
        mock_repo.head.is_detached = True
        tree_tag = Mock()
        tree_tag.name = "tree-tag"
        type(tree_tag).commit = PropertyMock(side_effect=ValueError("Cannot convert object to commit"))
        tag = Mock()
        tag.name = "v2.0.0"
        tag.commit = mock_repo.head.commit
        mock_repo.tags = [tree_tag, tag]

        with patch("image_tag_deriver.io_layer.Repo", return_value=mock_repo):
            result = IOLayer().resolve_git_ref()
        assert result == RefInfo("refs/tags/v2.0.0", "abcdef1234567890")

    def test_detached_head_only_tree_tag(self, mock_repo):
        mock_repo.head.is_detached = True
        tree_tag = Mock()
        type(tree_tag).commit = PropertyMock(side_effect=ValueError("Cannot convert object to commit"))
        mock_repo.tags = [tree_tag]

        with patch("image_tag_deriver.io_layer.Repo", return_value=mock_repo):
            result = IOLayer().resolve_git_ref()
        assert result == RefInfo("", "abcdef1234567890")

    def test_not_a_repository(self):
        with patch("image_tag_deriver.io_layer.Repo", side_effect=InvalidGitRepositoryError("/tmp")):
            assert IOLayer().resolve_git_ref("/tmp") is None
