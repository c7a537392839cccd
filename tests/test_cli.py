# tests/test_cli.py
import json

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider

from corenlp_bridge import setup_observability
from corenlp_bridge.cli import main


class TestCli:

    def test_no_command_prints_help(self, container, capsys):
        assert main([], container=container) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_languages(self, container, capsys):
        assert main(["languages"], container=container) == 0

        out = capsys.readouterr().out
        assert "english" in out
        assert "fra" in out

    def test_models(self, container, capsys, model_dir):
        assert main(["models", "--language", "fr"], container=container) == 0

        out = capsys.readouterr().out
        assert "pos.model" in out
        assert str(model_dir) in out

    def test_resolve_prints_properties(self, container, capsys, mock_gateway):
        code = main(
            ["resolve", "-l", "fr", "-a", "tokenize,pos", "--set", "pos.maxlen=70"],
            container=container,
        )

        assert code == 0
        properties = json.loads(capsys.readouterr().out)
        assert properties["annotators"] == "tokenize, pos"
        assert properties["parse.buildgraphs"] == "false"
        assert properties["pos.maxlen"] == "70"
        # The JVM is never touched
        mock_gateway.initialize.assert_not_called()

    def test_resolve_unknown_language(self, container, capsys):
        assert main(["resolve", "-l", "xx", "-a", "pos"], container=container) == 1
        assert "'xx'" in capsys.readouterr().out

    def test_doctor_reports_missing_files(self, container, capsys, model_dir):
        (model_dir / "grammar" / "englishPCFG.ser.gz").unlink()

        assert main(["doctor", "-l", "en", "-a", "tokenize,parse"], container=container) == 1
        assert "englishPCFG.ser.gz" in capsys.readouterr().out

    def test_doctor_all_present(self, container, capsys, jar_dir, test_settings):
        for jar in test_settings.CORENLP_JARS:
            (jar_dir / jar).write_text("jar")

        assert main(["doctor", "-l", "fr", "-a", "tokenize,pos,parse"], container=container) == 0
        assert "All resources present" in capsys.readouterr().out

    def test_doctor_and_resolve_agree_on_unreadable_model(self, container, capsys, model_dir):
        # A directory where the tagger should be is not a readable model file
        tagger = model_dir / "taggers" / "french.tagger"
        tagger.unlink()
        tagger.mkdir()

        assert main(["doctor", "-l", "fr", "-a", "tokenize,pos"], container=container) == 1
        assert main(["resolve", "-l", "fr", "-a", "tokenize,pos"], container=container) == 1
        assert "french.tagger" in capsys.readouterr().out

    def test_command_installs_sdk_tracer_provider(self, container):
        assert main(["languages"], container=container) == 0

        assert isinstance(trace.get_tracer_provider(), TracerProvider)

    def test_setup_observability_keeps_installed_provider(self, container):
        main(["languages"], container=container)

        assert setup_observability() is trace.get_tracer_provider()
