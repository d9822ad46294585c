import pytest

from conftest import gist_response
from gist_snippet.errors import GistFileNotFoundError, MissingFilesError
from gist_snippet.extractor import extract_content


class TestExtractContent:
    """Tests for pulling one file out of a gist response."""

    def test_returns_file_content(self):
        response = gist_response(("01.sh", " echo hello > myfile.txt "))

        assert extract_content(response, "01.sh") == " echo hello > myfile.txt "

    def test_picks_expected_file_from_two(self):
        response = gist_response(
            ("01.sh", " echo hello > myfile.txt "),
            ("02.sh", " echo goodbye > myOtherFile.txt "),
        )

        assert extract_content(response, "02.sh") == " echo goodbye > myOtherFile.txt "

    def test_missing_files_collection(self):
        with pytest.raises(MissingFilesError):
            extract_content({"id": "12345"}, "01.sh")

    def test_missing_file_names_the_file(self):
        response = gist_response(("01.sh", "echo"))

        with pytest.raises(GistFileNotFoundError) as exc_info:
            extract_content(response, "i_dont_exist.rb")

        assert exc_info.value.file_name == "i_dont_exist.rb"
        assert str(exc_info.value) == "i_dont_exist.rb not found in this gist"

    def test_empty_content_is_not_an_error(self):
        response = gist_response(("empty.txt", ""))

        assert extract_content(response, "empty.txt") == ""

    def test_absent_content_field_gives_empty_string(self):
        response = {"files": {"truncated.py": {"size": 0}}}

        assert extract_content(response, "truncated.py") == ""

    def test_response_is_not_mutated(self):
        response = gist_response(("01.sh", "echo"))
        snapshot = {"files": {"01.sh": {"content": "echo"}}}

        extract_content(response, "01.sh")

        assert response == snapshot


class TestMalformedResponses:
    """Parsed JSON that does not have the shape of a gist."""

    @pytest.mark.parametrize("files", ["01.sh and more", ["01.sh"], 42])
    def test_files_not_a_mapping(self, files):
        with pytest.raises(MissingFilesError):
            extract_content({"files": files}, "01.sh")

    def test_response_not_a_mapping(self):
        with pytest.raises(MissingFilesError):
            extract_content(["files"], "01.sh")

    @pytest.mark.parametrize("entry", ["echo", None, ["echo"]])
    def test_file_entry_not_an_object(self, entry):
        assert extract_content({"files": {"01.sh": entry}}, "01.sh") == ""
