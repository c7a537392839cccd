import os
import structlog
from typing import Any, Callable, Dict, Iterable, List, Optional

from corenlp_bridge.core.ports.pipeline_gateway import IPipelineGateway
from corenlp_bridge.core.domain.exceptions import BridgeInitializationError, DomainError
from corenlp_bridge.shared.config import settings

logger = structlog.get_logger()

# Java classes reachable through the gateway, by short name.
BRIDGED_CLASSES: Dict[str, str] = {
    "StanfordCoreNLP": "edu.stanford.nlp.pipeline.StanfordCoreNLP",
    "Annotation": "edu.stanford.nlp.pipeline.Annotation",
    "Word": "edu.stanford.nlp.ling.Word",
    "CoreLabel": "edu.stanford.nlp.ling.CoreLabel",
    "MaxentTagger": "edu.stanford.nlp.tagger.maxent.MaxentTagger",
    "CRFClassifier": "edu.stanford.nlp.ie.crf.CRFClassifier",
    "LexicalizedParser": "edu.stanford.nlp.parser.lexparser.LexicalizedParser",
    "Options": "edu.stanford.nlp.parser.lexparser.Options",
    "Properties": "java.util.Properties",
    "ArrayList": "java.util.ArrayList",
}

class JniusPipelineGateway(IPipelineGateway):
    """
    Pipeline gateway running CoreNLP in an in-process JVM through pyjnius.

    The JVM can only be configured before it starts, so `initialize` writes
    the classpath and JVM options to jnius_config and only then imports jnius.
    """

    def __init__(
        self,
        jar_files: Optional[List[str]] = None,
        jvm_args: Optional[List[str]] = None,
        log_file: Optional[str] = None,
    ):
        self.jar_files = list(jar_files) if jar_files is not None else settings.JAR_FILES
        self.jvm_args = list(jvm_args) if jvm_args is not None else list(settings.JVM_ARGS)
        self.log_file = log_file if log_file is not None else settings.JVM_LOG_FILE
        self._classes: Dict[str, Any] = {}
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        if self._initialized:
            return

        for jar in self.jar_files:
            if not os.path.isfile(jar):
                logger.error("jvm_jar_missing", path=jar)
                raise BridgeInitializationError(jar)

        self._configure_jvm()

        for name, java_name in BRIDGED_CLASSES.items():
            self._classes[name] = self._autoclass(java_name)

        if self.log_file:
            self._redirect_java_stderr(self.log_file)

        self._initialized = True
        logger.info("jvm_bridge_initialized", jars=len(self.jar_files), jvm_args=self.jvm_args)

    def _configure_jvm(self) -> None:
        try:
            import jnius_config
        except ImportError as e:
            logger.error("jvm_runtime_missing", msg="pyjnius library not installed.")
            raise BridgeInitializationError(
                "jnius_config", "pyjnius is not installed (pip install 'corenlp-bridge[jvm]')"
            ) from e

        if jnius_config.vm_running:
            logger.warning("jvm_already_running", msg="JVM options and classpath left unchanged.")
            return

        if self.jvm_args:
            jnius_config.add_options(*self.jvm_args)
        jnius_config.set_classpath(*self.jar_files)

    def _autoclass(self, java_name: str) -> Callable[..., Any]:
        from jnius import autoclass
        return autoclass(java_name)

    def _redirect_java_stderr(self, path: str) -> None:
        system = self._autoclass("java.lang.System")
        print_stream = self._autoclass("java.io.PrintStream")
        file_stream = self._autoclass("java.io.FileOutputStream")
        system.setErr(print_stream(file_stream(path, True)))
        logger.debug("jvm_stderr_redirected", path=path)

    def get_class(self, name: str) -> Any:
        """Returns one of the bridged Java classes by short name."""
        if not self._initialized:
            self.initialize()
        if name not in self._classes:
            raise DomainError(f"Java class '{name}' is not bridged. Available: {sorted(BRIDGED_CLASSES)}")
        return self._classes[name]

    def create_pipeline(self, properties: Dict[str, str]) -> Any:
        props = self.get_class("Properties")()
        for key, value in properties.items():
            props.setProperty(str(key), str(value))
        return self.get_class("StanfordCoreNLP")(props)

    def create_annotation(self, text: str) -> Any:
        return self.get_class("Annotation")(text)

    def create_token_list(self, tokens: Iterable[Any]) -> Any:
        word = self.get_class("Word")
        token_list = self.get_class("ArrayList")()
        for token in tokens:
            token_list.add(word(str(token)))
        return token_list
