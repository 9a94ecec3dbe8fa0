"""Unit tests for application settings configuration."""

from pathlib import Path

from sanctuary_cms.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_seed_data_dir_points_at_bundled_yaml():
    data_dir = Path(Settings().seed_data_dir)
    assert (data_dir / "faqs.yaml").is_file()
    assert (data_dir / "resources.yaml").is_file()


def test_defaults():
    settings = Settings()
    assert settings.faq_page_size == 10
    assert settings.resource_page_size == 12
    assert settings.diff_treat_missing_previous_as_all_added is False
