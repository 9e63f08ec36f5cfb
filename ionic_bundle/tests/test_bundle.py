"""
Test suite for bundle assembly

Tests:
- Module set ids (order independence, duplicates)
- Loader call wrapper
- build_bundle end to end
"""

import re

from ionic_bundle.bundle import build_bundle, format_bundle_content, get_bundled_modules_id
from ionic_bundle.config import FormatterConfig
from ionic_bundle.descriptors import Bundle, BundleComponent, Component, ComponentMode
from ionic_bundle.formatters import format_component_mode_loader
from ionic_bundle.hashing import generate_bundle_id


def _bundle(*classes):
    return Bundle(components=[
        BundleComponent(component=Component(tag=f"x-{c.lower()}", componentClass=c))
        for c in classes
    ])


class TestModulesId:
    """Test module set ids"""

    def test_sorted_and_joined(self):
        assert get_bundled_modules_id(_bundle('Toggle', 'Badge', 'Range')) == 'Badge.Range.Toggle'

    def test_order_independent(self):
        assert get_bundled_modules_id(_bundle('B', 'A', 'C')) == \
            get_bundled_modules_id(_bundle('C', 'B', 'A'))

    def test_duplicates_are_kept(self):
        assert get_bundled_modules_id(_bundle('B', 'A', 'B')) == 'A.B.B'

    def test_single(self):
        assert get_bundled_modules_id(_bundle('Badge')) == 'Badge'

    def test_empty(self):
        assert get_bundled_modules_id(Bundle()) == ''

    def test_lexicographic(self):
        assert get_bundled_modules_id(_bundle('b', 'B', 'a')) == 'B.a.b'


class TestBundleContent:
    """Test the loader call wrapper"""

    def test_layout(self):
        assert format_bundle_content('1', 'MODULES', 'LOADERS') == (
            "Ionic.loadComponents(\n\n"
            "/**** bundleId ****/\n"
            "1,\n\n"
            "/**** bundled modules ****/\n"
            "MODULES,\n\n"
            "LOADERS\n"
            ")"
        )

    def test_loader_function_from_config(self):
        content = format_bundle_content('1', 'm', 'l', FormatterConfig(loader_function='App.load'))
        assert content.startswith('App.load(\n')


class TestBuildBundle:
    """Test end-to-end bundle building"""

    def test_output_names(self, two_component_bundle):
        output = build_bundle(two_component_bundle, 'function Range(){}')
        assert output.module_id == 'Badge.Range'
        assert re.match(r'^[0-9a-f]{8}$', output.bundle_id)
        assert output.bundle_id == generate_bundle_id(output.content)
        assert output.file_name == f'ionic.{output.bundle_id}.js'

    def test_content_contains_records_in_order(self, two_component_bundle, watched_component, plain_component):
        output = build_bundle(two_component_bundle, 'MODULES')
        range_loader = format_component_mode_loader(watched_component, ComponentMode(name='ios'))
        badge_loader = format_component_mode_loader(plain_component, ComponentMode(name='md', styles='a\nb'))
        assert output.content == format_bundle_content(
            "'Badge.Range'", 'MODULES', range_loader + ',\n' + badge_loader,
        )

    def test_modules_passed_through(self, two_component_bundle):
        modules = "var a = '1';\n/* keep */"
        assert modules in build_bundle(two_component_bundle, modules).content

    def test_deterministic(self, two_component_bundle):
        assert build_bundle(two_component_bundle, 'm') == build_bundle(two_component_bundle, 'm')

    def test_module_change_changes_id(self, two_component_bundle):
        assert build_bundle(two_component_bundle, 'a').bundle_id != \
            build_bundle(two_component_bundle, 'b').bundle_id

    def test_entry_without_mode(self):
        output = build_bundle(_bundle('Badge'), '')
        assert "/** x-badge: [5] modeName **/\n/*  */ ''" in output.content

    def test_config(self, two_component_bundle):
        config = FormatterConfig(hash_length=12, file_name_prefix='app.')
        output = build_bundle(two_component_bundle, 'm', config=config)
        assert len(output.bundle_id) == 12
        assert output.file_name == f'app.{output.bundle_id}.js'
