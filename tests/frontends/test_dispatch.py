"""Tests for front-end dispatch and the Svelte/plain front-ends"""

import pytest
from multitranspile.core.errors import ScriptParseError, UnsupportedFormatError
from multitranspile.frontends import SUPPORTED_EXTENSIONS, get_frontend, parse_source
from multitranspile.frontends.script import PlainScriptFrontend
from multitranspile.frontends.svelte import SvelteFrontend
from multitranspile.frontends.vue import VueFrontend


class TestGetFrontend:
    """Test suite for extension dispatch"""

    @pytest.mark.parametrize("ext", [".js", ".jsx", ".ts", ".tsx"])
    def test_plain_extensions(self, ext):
        """Test plain script formats"""
        assert isinstance(get_frontend(ext), PlainScriptFrontend)

    def test_component_extensions(self):
        """Test component formats"""
        assert isinstance(get_frontend(".vue"), VueFrontend)
        assert isinstance(get_frontend(".svelte"), SvelteFrontend)

    def test_case_insensitive(self):
        """Test upper-case extensions"""
        assert isinstance(get_frontend(".JSX"), PlainScriptFrontend)

    def test_unsupported(self):
        """Test unknown extensions raise with the extension in the message"""
        with pytest.raises(UnsupportedFormatError) as info:
            get_frontend(".txt")
        assert ".txt" in str(info.value)

    def test_supported_list(self):
        """Test the recognized extension set"""
        assert set(SUPPORTED_EXTENSIONS) == {".js", ".jsx", ".ts", ".tsx", ".vue", ".svelte"}


class TestSvelteFrontend:
    """Test suite for the tag-matching Svelte front-end"""

    def test_extract_script(self):
        """Test the inner content of the script tag"""
        text = '<script lang="ts">\n  let n = 0;\n</script>\n\n<p>{n}</p>\n'
        assert SvelteFrontend().extract_script(text) == "\n  let n = 0;\n"

    def test_first_script_only(self):
        """Test only the first script block is read"""
        text = (
            '<script context="module">\nexport const a = 1;\n</script>\n'
            "<script>\nwindow.x();\n</script>\n"
        )
        assert SvelteFrontend().extract_script(text) == "\nexport const a = 1;\n"

    def test_no_script(self):
        """Test markup-only components"""
        assert SvelteFrontend().extract_script("<h1>Hello</h1>\n") is None

    def test_empty_script(self):
        """Test an empty script tag counts as no script"""
        assert SvelteFrontend().extract_script("<script></script>") is None


class TestParseSource:
    """Test suite for parse_source"""

    def test_plain_script(self):
        """Test plain files are parsed whole"""
        parsed = parse_source("window.x = 1;\n", ".js")
        assert parsed.text == "window.x = 1;\n"

    def test_component_without_script(self):
        """Test components without a script give no tree"""
        assert parse_source("<h1>Hi</h1>", ".svelte") is None

    def test_parse_error_in_component(self):
        """Test malformed component scripts raise"""
        with pytest.raises(ScriptParseError):
            parse_source("<script>\nconst = ;\n</script>\n", ".vue")

    def test_vue_script_with_comment_marker_string(self):
        """Test a component whose script holds ``"<!--"`` parses cleanly"""
        parsed = parse_source(
            '<script>\nconst marker = "<!--";\nwindow.a();\n</script>\n'
            "<template><div><!-- note --></div></template>\n",
            ".vue",
        )
        assert parsed.text == '\nconst marker = "<!--";\nwindow.a();\n'
