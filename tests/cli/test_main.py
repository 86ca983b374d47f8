"""Test CLI main module"""

import pytest
import subprocess
import sys
from pathlib import Path
from multitranspile.cli.main import main, transpile, transpile_file
from multitranspile.core.config import TranspilerConfig
from multitranspile.core.errors import (
    InputNotFoundError, ScriptParseError, UnsupportedFormatError
)
from multitranspile.core.extraction_logger import ExtractionLogger

VUE_COMPONENT = """<template>
  <div>Hello</div>
</template>

<script lang="ts">
console.log(window.location.href);
</script>
"""

EXPECTED_FILES = [
    "file.jsx", "file.tsx", "file.vue", "file.ts.vue", "file.svelte",
    "file.ts.svelte", "angular_folder/my-component.component.ts",
    "file.js", "file.es5.js", "file.ts",
]


class TestTranspileFile:
    """Test suite for single-file extraction"""

    def test_plain_script(self, tmp_path):
        """Test extracting from a .js file"""
        js_file = tmp_path / "widget.js"
        js_file.write_text("const a = 1;\ndocument.title = 'x';\n")

        assert transpile_file(js_file) == "document.title = 'x';"

    def test_vue_component(self, tmp_path):
        """Test extracting from a .vue file"""
        vue_file = tmp_path / "Widget.vue"
        vue_file.write_text(VUE_COMPONENT)

        assert transpile_file(vue_file) == "console.log(window.location.href);"

    def test_svelte_without_script(self, tmp_path):
        """Test a component without script yields an empty block and a warning"""
        svelte_file = tmp_path / "Plain.svelte"
        svelte_file.write_text("<h1>Hello</h1>\n")
        logger = ExtractionLogger()

        assert transpile_file(svelte_file, logger=logger) == ""
        assert len(logger.warnings) == 1

    def test_uppercase_extension(self, tmp_path):
        """Test extensions are matched case-insensitively"""
        js_file = tmp_path / "LEGACY.JS"
        js_file.write_text("window.init();\n")

        assert transpile_file(js_file) == "window.init();"

    def test_extra_globals(self, tmp_path):
        """Test configured identifiers are extracted too"""
        js_file = tmp_path / "nav.js"
        js_file.write_text("navigator.share({});\n")
        config = TranspilerConfig().with_globals(["navigator"])

        assert transpile_file(js_file, config) == "navigator.share({});"

    def test_missing_file_raises_error(self, tmp_path):
        """Test that missing file raises error"""
        missing_file = tmp_path / "nonexistent.js"

        with pytest.raises(InputNotFoundError):
            transpile_file(missing_file)
        with pytest.raises(FileNotFoundError):
            transpile_file(missing_file)

    def test_unsupported_extension(self, tmp_path):
        """Test an unknown extension is rejected"""
        txt_file = tmp_path / "notes.txt"
        txt_file.write_text("window.x = 1;\n")

        with pytest.raises(UnsupportedFormatError) as info:
            transpile_file(txt_file)
        assert info.value.extension == ".txt"

    def test_syntax_error(self, tmp_path):
        """Test a malformed script raises a parse error"""
        js_file = tmp_path / "broken.js"
        js_file.write_text("window.open(;\n")

        with pytest.raises(ScriptParseError):
            transpile_file(js_file)


class TestTranspile:
    """Test suite for the full transpile step"""

    def test_writes_all_files(self, tmp_path):
        """Test every output file is generated"""
        js_file = tmp_path / "in.js"
        js_file.write_text("localStorage.clear();\n")
        out = tmp_path / "out"

        written = transpile(js_file, TranspilerConfig(output_dir=out))

        assert [p.relative_to(out).as_posix() for p in written] == EXPECTED_FILES

    def test_failure_writes_nothing(self, tmp_path):
        """Test a parse failure leaves no output directory"""
        js_file = tmp_path / "bad.js"
        js_file.write_text("const = ;\n")
        out = tmp_path / "out"

        with pytest.raises(ScriptParseError):
            transpile(js_file, TranspilerConfig(output_dir=out))
        assert not out.exists()


class TestCliMain:
    """Test suite for CLI main"""

    def test_vue_end_to_end(self, tmp_path, capsys):
        """Test a Vue component produces a typed Vue output with its hook"""
        vue_file = tmp_path / "Widget.vue"
        vue_file.write_text(VUE_COMPONENT)
        out = tmp_path / "out"

        main([str(vue_file), str(out)])

        text = (out / "file.ts.vue").read_text(encoding="utf-8")
        assert '<script setup lang="ts">' in text
        assert "import { onMounted } from 'vue';" in text
        start = text.index("onMounted((): void => {\n") + len("onMounted((): void => {\n")
        body = text[start:text.index("\n});", start)]
        assert body.strip() == "console.log(window.location.href);"

        stdout = capsys.readouterr().out
        assert "Transpilation completed" in stdout
        assert stdout.count("Generated: ") == 10

    def test_trailing_comment_hook_body(self, tmp_path):
        """Test a commented statement without semicolon lands in the hook terminated"""
        js_file = tmp_path / "log.js"
        js_file.write_text("console.log(window.location.href) // log\n")
        out = tmp_path / "out"

        main([str(js_file), str(out)])

        text = (out / "file.ts.vue").read_text(encoding="utf-8")
        start = text.index("onMounted((): void => {\n") + len("onMounted((): void => {\n")
        body = text[start:text.index("\n});", start)]
        assert body.strip() == "console.log(window.location.href);"

    def test_no_globals_still_generates(self, tmp_path):
        """Test input without globals still produces every file"""
        js_file = tmp_path / "pure.js"
        js_file.write_text("export const add = (a, b) => a + b;\n")
        out = tmp_path / "out"

        main([str(js_file), str(out)])

        for name in EXPECTED_FILES:
            assert (out / name).is_file()
        assert (out / "file.js").read_text(encoding="utf-8") == "(() => {\n\n})();"

    def test_unsupported_extension_exits(self, tmp_path, capsys):
        """Test .txt input exits with status 1 and writes nothing"""
        txt_file = tmp_path / "notes.txt"
        txt_file.write_text("window.x = 1;\n")
        out = tmp_path / "out"

        with pytest.raises(SystemExit) as info:
            main([str(txt_file), str(out)])

        assert info.value.code == 1
        assert ".txt" in capsys.readouterr().err
        assert not out.exists()

    def test_missing_input_exits(self, tmp_path, capsys):
        """Test a missing input file exits with status 1"""
        with pytest.raises(SystemExit) as info:
            main([str(tmp_path / "gone.js"), str(tmp_path / "out")])

        assert info.value.code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_parse_error_exits(self, tmp_path, capsys):
        """Test a syntax error exits with status 1 and writes nothing"""
        js_file = tmp_path / "bad.js"
        js_file.write_text("if (window {\n")
        out = tmp_path / "out"

        with pytest.raises(SystemExit) as info:
            main([str(js_file), str(out)])

        assert info.value.code == 1
        assert "Error parsing input file" in capsys.readouterr().err
        assert not out.exists()

    def test_non_utf8_input_exits(self, tmp_path, capsys):
        """Test undecodable input reports an error line instead of a traceback"""
        js_file = tmp_path / "latin1.js"
        js_file.write_bytes(b"window.title = '\xe9t\xe9';\n")
        out = tmp_path / "out"

        with pytest.raises(SystemExit) as info:
            main([str(js_file), str(out)])

        assert info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert "not valid UTF-8" in err
        assert "Traceback" not in err
        assert not out.exists()

    def test_missing_argument_is_usage_error(self, capsys):
        """Test running without an input file"""
        with pytest.raises(SystemExit) as info:
            main([])

        assert info.value.code == 2

    def test_global_flag(self, tmp_path):
        """Test --global extends the identifier set"""
        js_file = tmp_path / "store.js"
        js_file.write_text("sessionStorage.clear();\nwindow.close();\n")
        out = tmp_path / "out"

        main([str(js_file), str(out), "--global", "sessionStorage"])

        text = (out / "file.js").read_text(encoding="utf-8")
        assert "sessionStorage.clear();" in text
        assert "window.close();" in text

    def test_verbose_prints_summary(self, tmp_path, capsys):
        """Test --verbose prints the extraction summary"""
        js_file = tmp_path / "in.js"
        js_file.write_text("function f(window) { window.x(); }\ndocument.y();\n")

        main([str(js_file), str(tmp_path / "out"), "--verbose"])

        stdout = capsys.readouterr().out
        assert "=== Extraction Summary ===" in stdout
        assert "document: 1" in stdout

    def test_module_invocation(self, tmp_path):
        """Test running the package as a module"""
        js_file = tmp_path / "in.jsx"
        js_file.write_text("const App = () => <div>{document.title}</div>;\n")
        out = tmp_path / "out"

        result = subprocess.run(
            [sys.executable, "-m", "multitranspile", str(js_file), str(out)],
            capture_output=True,
            text=True
        )

        assert result.returncode == 0, f"CLI failed: {result.stderr}"
        assert Path(out / "file.jsx").exists()
        assert "document.title" in (out / "file.tsx").read_text(encoding="utf-8")
