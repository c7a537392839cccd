import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "corenlp-bridge"
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # --- JVM Bootstrap ---
    # Folder holding the CoreNLP JAR files. Relative to the working directory.
    CORENLP_JAR_PATH: str = "bin"
    CORENLP_JARS: List[str] = [
        "joda-time.jar",
        "xom.jar",
        "stanford-corenlp.jar",
        "jollyday.jar",
    ]
    JVM_ARGS: List[str] = ["-Xms512M", "-Xmx1024M"]
    # Java's System.err is redirected here when set.
    JVM_LOG_FILE: Optional[str] = None

    # --- Models ---
    # Folder containing the per-family model folders (taggers/, grammar/, ...).
    # Defaults to the JAR folder.
    CORENLP_MODEL_PATH: Optional[str] = None
    DEFAULT_LANGUAGE: str = "english"
    # Requesting an annotator that has no model for the language is an error.
    STRICT_MODEL_AVAILABILITY: bool = True

    # --- Dynamic Path Resolution ---

    @property
    def MODEL_PATH(self) -> str:
        return self.CORENLP_MODEL_PATH or self.CORENLP_JAR_PATH

    @property
    def JAR_FILES(self) -> List[str]:
        """
        Absolute classpath entries for the JVM. A relative CORENLP_JAR_PATH
        is resolved against the current working directory.
        """
        jar_path = os.path.abspath(self.CORENLP_JAR_PATH)
        return [os.path.join(jar_path, jar) for jar in self.CORENLP_JARS]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
