# tests/conftest.py
import pytest
from pathlib import Path
from unittest.mock import MagicMock

from corenlp_bridge.shared.config import Settings
from corenlp_bridge.shared.container import Container
from corenlp_bridge.core.domain.catalog import ModelCatalog
from corenlp_bridge.core.domain.languages import LanguageRegistry
from corenlp_bridge.core.domain.models import LanguageCode
from corenlp_bridge.core.domain.resolver import ConfigurationResolver, SUTIME_FOLDER, SUTIME_RULE_FILES
from corenlp_bridge.core.ports.pipeline_gateway import IPipelineGateway


def make_model_tree(root: Path, languages) -> Path:
    """Creates an empty file for every catalog model of `languages`, plus the SUTime rules."""
    catalog = ModelCatalog()
    for language in languages:
        for model_file in catalog.build_index(language).values():
            path = root / model_file.path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("model")

    sutime = root / SUTIME_FOLDER
    sutime.mkdir(parents=True, exist_ok=True)
    for name in SUTIME_RULE_FILES:
        (sutime / name).write_text("rules")
    return root


@pytest.fixture
def model_dir(tmp_path):
    """A model folder holding every English and French model."""
    return make_model_tree(tmp_path / "models", [LanguageCode.ENGLISH, LanguageCode.FRENCH])


@pytest.fixture
def jar_dir(tmp_path):
    jars = tmp_path / "bin"
    jars.mkdir()
    return jars


@pytest.fixture
def test_settings(model_dir, jar_dir):
    return Settings(
        CORENLP_JAR_PATH=str(jar_dir),
        CORENLP_MODEL_PATH=str(model_dir),
        LOG_FORMAT="console",
    )


@pytest.fixture
def resolver(model_dir):
    return ConfigurationResolver(
        registry=LanguageRegistry(),
        catalog=ModelCatalog(),
        model_path=str(model_dir),
    )


@pytest.fixture(scope="function")
def mock_gateway():
    """Returns a mock implementation of the Pipeline Gateway."""
    gateway = MagicMock(spec=IPipelineGateway)
    gateway.is_initialized = False

    def _initialize():
        gateway.is_initialized = True

    gateway.initialize.side_effect = _initialize
    gateway.create_pipeline.return_value = MagicMock(name="pipeline")
    return gateway


@pytest.fixture(scope="function")
def container(test_settings, mock_gateway):
    """
    Sets up the Dependency Injection Container for testing, with the test
    settings and the mock gateway in place of the JVM.
    """
    container = Container()
    container.config.override(test_settings)
    container.pipeline_gateway.override(mock_gateway)

    yield container

    container.reset_override()
