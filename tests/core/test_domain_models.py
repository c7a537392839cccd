# tests/core/test_domain_models.py
import pytest
from pydantic import ValidationError

from corenlp_bridge.core.domain.models import (
    LanguageCode,
    LanguageProfile,
    ModelFile,
    ResolvedConfiguration,
)


class TestModelFile:
    def test_frozen(self):
        model_file = ModelFile(family="pos", key="pos.model", path="taggers/french.tagger")
        with pytest.raises(ValidationError):
            model_file.path = "taggers/other.tagger"


class TestLanguageProfile:
    def _profile(self):
        return LanguageProfile(
            language=LanguageCode.ENGLISH,
            model_files={
                "pos.model": ModelFile(family="pos", key="pos.model", path="taggers/a.tagger"),
                "ner.model.3class": ModelFile(family="ner", key="ner.model.3class", path="classifiers/b.gz"),
            },
        )

    def test_files_for_matches_whole_family(self):
        profile = self._profile()
        assert [f.key for f in profile.files_for(["ner"])] == ["ner.model.3class"]
        assert profile.files_for(["n", "model"]) == []

    def test_has_family(self):
        assert self._profile().has_family("pos")
        assert not self._profile().has_family("parse")

    def test_with_model_returns_new_profile(self):
        profile = self._profile()
        updated = profile.with_model(ModelFile(family="parse", key="parse.model", path="grammar/c.gz"))

        assert "parse.model" in updated.model_files
        assert "parse.model" not in profile.model_files

    def test_model_files_are_read_only(self):
        profile = self._profile()

        with pytest.raises(TypeError):
            profile.model_files["pos.model"] = ModelFile(family="pos", key="pos.model", path="taggers/x.tagger")
        with pytest.raises(AttributeError):
            profile.model_files.clear()
        assert set(profile.model_files) == {"pos.model", "ner.model.3class"}

    def test_with_model_keeps_model_files_read_only(self):
        updated = self._profile().with_model(ModelFile(family="parse", key="parse.model", path="grammar/c.gz"))

        with pytest.raises(TypeError):
            del updated.model_files["parse.model"]

    def test_source_dict_changes_do_not_leak_in(self):
        files = {"pos.model": ModelFile(family="pos", key="pos.model", path="taggers/a.tagger")}
        profile = LanguageProfile(language=LanguageCode.FRENCH, model_files=files)

        files.clear()

        assert "pos.model" in profile.model_files

    def test_default_model_files_are_read_only(self):
        profile = LanguageProfile(language=LanguageCode.ARABIC)

        with pytest.raises(TypeError):
            profile.model_files["pos.model"] = ModelFile(family="pos", key="pos.model", path="taggers/a.tagger")

    def test_language_must_be_known(self):
        with pytest.raises(ValidationError):
            LanguageProfile(language="klingon")


class TestResolvedConfiguration:
    def test_to_properties_is_a_copy(self):
        config = ResolvedConfiguration(
            language=LanguageCode.FRENCH,
            annotators=("tokenize",),
            properties={"annotators": "tokenize"},
        )
        props = config.to_properties()
        props["annotators"] = "pos"

        assert config.properties["annotators"] == "tokenize"
