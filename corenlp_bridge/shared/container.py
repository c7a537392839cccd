# corenlp_bridge/shared/container.py
from dependency_injector import containers, providers

from corenlp_bridge.shared.config import settings
from corenlp_bridge.adapters.engines.jnius_gateway import JniusPipelineGateway
from corenlp_bridge.core.domain.catalog import ModelCatalog
from corenlp_bridge.core.domain.languages import LanguageRegistry
from corenlp_bridge.core.domain.resolver import ConfigurationResolver
from corenlp_bridge.core.use_cases.select_language import SelectLanguage
from corenlp_bridge.core.use_cases.load_pipeline import LoadPipeline

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Assembly instructions for the resolver, the engine gateway and the use cases.
    """

    # 1. Configuration (overridable in tests)
    config = providers.Object(settings)

    # 2. Static tables
    language_registry = providers.Singleton(LanguageRegistry)
    model_catalog = providers.Singleton(ModelCatalog)

    # 3. Gateway (Singleton: one JVM per process)
    pipeline_gateway = providers.Singleton(
        JniusPipelineGateway,
        jar_files=config.provided.JAR_FILES,
        jvm_args=config.provided.JVM_ARGS,
        log_file=config.provided.JVM_LOG_FILE,
    )

    # 4. Resolution
    configuration_resolver = providers.Factory(
        ConfigurationResolver,
        registry=language_registry,
        catalog=model_catalog,
        model_path=config.provided.MODEL_PATH,
        strict=config.provided.STRICT_MODEL_AVAILABILITY,
    )

    # 5. Use Cases
    select_language_use_case = providers.Factory(
        SelectLanguage,
        resolver=configuration_resolver,
    )

    load_pipeline_use_case = providers.Factory(
        LoadPipeline,
        resolver=configuration_resolver,
        gateway=pipeline_gateway,
    )

container = Container()
