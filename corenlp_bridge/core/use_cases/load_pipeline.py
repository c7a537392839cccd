# corenlp_bridge/core/use_cases/load_pipeline.py
import structlog
from typing import Any, Iterable, Mapping, Optional

from corenlp_bridge.core.domain.models import LanguageProfile
from corenlp_bridge.core.domain.exceptions import DomainError
from corenlp_bridge.core.domain.resolver import ConfigurationResolver
from corenlp_bridge.core.ports.pipeline_gateway import IPipelineGateway
from corenlp_bridge.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class LoadPipeline:
    """
    Use Case: Builds a CoreNLP pipeline for a set of annotators.

    Responsibilities:
    1. Makes sure the bridge is bootstrapped.
    2. Resolves the property mapping (model files, fixups, overrides).
    3. Hands the mapping to the engine via the Port and returns its handle.

    A call either returns a pipeline or raises; nothing is cached between calls.
    """

    def __init__(self, resolver: ConfigurationResolver, gateway: IPipelineGateway):
        self.resolver = resolver
        self.gateway = gateway

    def execute(
        self,
        profile: LanguageProfile,
        annotators: Iterable[Any],
        custom_properties: Optional[Mapping[Any, Any]] = None,
    ) -> Any:
        annotators = list(annotators)

        with tracer.start_as_current_span("use_case.load_pipeline") as span:
            span.set_attribute("corenlp.language", profile.language.value)
            span.set_attribute("corenlp.annotators", ", ".join(str(a) for a in annotators))

            logger.info(
                "pipeline_load_started",
                lang=profile.language.value,
                annotators=[str(a) for a in annotators],
            )

            if not self.gateway.is_initialized:
                self.gateway.initialize()

            try:
                config = self.resolver.resolve(profile, annotators, custom_properties)
            except DomainError as e:
                logger.error("pipeline_config_failed", error=e.message)
                raise

            span.set_attribute("corenlp.property_count", len(config.properties))

            try:
                pipeline = self.gateway.create_pipeline(config.to_properties())
            except Exception as e:
                # Engine rejections reach the caller untouched.
                logger.error("pipeline_construction_failed", error=str(e), exc_info=True)
                raise

            logger.info("pipeline_loaded", lang=profile.language.value, annotators=list(config.annotators))
            return pipeline
