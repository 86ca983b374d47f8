"""Tests for the Vue single-file component front-end"""

from multitranspile.frontends.vue import VueFrontend, parse_attrs, parse_component

COMPONENT = """<template>
  <div>
    <template v-if="ok"><span>{{ msg }}</span></template>
    <br/>
  </div>
</template>

<script lang="ts">
export default {
  mounted() {
    window.scrollTo(0, 0);
  }
};
</script>

<style scoped>
div { color: red; }
</style>

<i18n>{ "en": {} }</i18n>
"""


class TestParseComponent:
    """Test suite for block splitting"""

    def test_blocks(self):
        """Test every top-level block is found"""
        descriptor = parse_component(COMPONENT)
        assert descriptor.template is not None
        assert descriptor.script is not None
        assert descriptor.script_setup is None
        assert len(descriptor.styles) == 1
        assert [b.type for b in descriptor.custom_blocks] == ["i18n"]

    def test_nested_template_does_not_end_block(self):
        """Test nested template tags are part of the template content"""
        descriptor = parse_component(COMPONENT)
        content = descriptor.template.content
        assert '<template v-if="ok">' in content
        assert content.rstrip().endswith("</div>")

    def test_script_content_and_attrs(self):
        """Test raw script content and its attributes"""
        descriptor = parse_component(COMPONENT)
        script = descriptor.script
        assert script.lang == "ts"
        assert script.content.startswith("\nexport default {")
        assert "window.scrollTo(0, 0);" in script.content
        assert COMPONENT[script.start:script.end] == script.content

    def test_style_attrs(self):
        """Test valueless attributes"""
        descriptor = parse_component(COMPONENT)
        assert descriptor.styles[0].attrs == {"scoped": True}

    def test_script_setup(self):
        """Test ``<script setup>`` is kept apart from the plain script"""
        descriptor = parse_component(
            "<script>\nexport default {};\n</script>\n"
            "<script setup>\nconst a = 1;\n</script>\n"
        )
        assert descriptor.script.content == "\nexport default {};\n"
        assert descriptor.script_setup.content == "\nconst a = 1;\n"
        assert descriptor.script_setup.is_setup

    def test_commented_out_script_ignored(self):
        """Test blocks inside HTML comments are skipped"""
        descriptor = parse_component("<!-- <script>bad(</script> -->\n<template><p/></template>\n")
        assert descriptor.script is None
        assert descriptor.template is not None

    def test_comment_marker_inside_script_is_text(self):
        """Test ``<!--`` in a script string does not hide the closing tag"""
        descriptor = parse_component(
            '<script>\nconst marker = "<!--";\nwindow.a();\n</script>\n'
            "<template><div><!-- note --></div></template>\n"
        )
        assert descriptor.script.content == '\nconst marker = "<!--";\nwindow.a();\n'
        assert descriptor.template.content == "<div><!-- note --></div>"

    def test_commented_template_tag_inside_template(self):
        """Test a commented-out nested template does not change nesting depth"""
        descriptor = parse_component(
            "<template><div><!-- <template> --></div></template>\n<script>\nx();\n</script>\n"
        )
        assert descriptor.template.content == "<div><!-- <template> --></div>"
        assert descriptor.script.content == "\nx();\n"

    def test_parse_attrs(self):
        """Test quoted, unquoted and bare attributes"""
        assert parse_attrs(' setup lang="ts" src=\'./a.ts\' x=1') == {
            "setup": True, "lang": "ts", "src": "./a.ts", "x": "1"
        }


class TestVueFrontend:
    """Test suite for VueFrontend.extract_script"""

    def test_extract_script(self):
        """Test the script block content is returned"""
        script = VueFrontend().extract_script(COMPONENT)
        assert "window.scrollTo(0, 0);" in script

    def test_setup_fallback(self):
        """Test components with only script setup use it"""
        text = "<template><div/></template>\n<script setup lang=\"ts\">\ndocument.title = 'x';\n</script>\n"
        assert VueFrontend().extract_script(text) == "\ndocument.title = 'x';\n"

    def test_no_script(self):
        """Test a template-only component has no script"""
        assert VueFrontend().extract_script("<template><div/></template>\n") is None

    def test_empty_script(self):
        """Test an empty script block counts as no script"""
        assert VueFrontend().extract_script("<script></script>") is None
