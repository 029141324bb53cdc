from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase
from django.test.utils import override_settings

from cleancss_filter.conf import settings
from cleancss_filter.conf import CleanCSSConf


def create_conf(**attrs):
    # Creating a new appconf.AppConf subclass will cause
    # its configuration to be resolved.
    # We use this to force the CleanCSSConf to be re-resolved,
    # when we've changed the settings.
    attrs["__module__"] = None
    return type("TestCleanCSSConf", (CleanCSSConf,), attrs)


class ConfTestCase(SimpleTestCase):
    def test_defaults(self):
        # cleancss_filter/test_settings.py sets none of these
        self.assertEqual(settings.CLEANCSS_BINARY, "/usr/bin/cleancss")
        self.assertIsNone(settings.CLEANCSS_NODE_BINARY)
        self.assertEqual(settings.CLEANCSS_NODE_PATHS, [])
        self.assertIsNone(settings.CLEANCSS_TIMEOUT)
        self.assertFalse(settings.CLEANCSS_VERBOSE)

    @override_settings(CLEANCSS_NODE_PATHS=("/opt/node_modules",))
    def test_node_paths_tuple(self):
        conf = create_conf()
        self.assertEqual(conf.NODE_PATHS, ["/opt/node_modules"])

    @override_settings(CLEANCSS_NODE_PATHS="/opt/node_modules")
    def test_node_paths_string(self):
        with self.assertRaises(ImproperlyConfigured):
            create_conf()

    @override_settings(CLEANCSS_TIMEOUT=2.5)
    def test_timeout(self):
        conf = create_conf()
        self.assertEqual(conf.TIMEOUT, 2.5)

    def test_invalid_timeout(self):
        for value in (0, -1, "10", True):
            with self.subTest(value=value):
                with override_settings(CLEANCSS_TIMEOUT=value):
                    with self.assertRaises(ImproperlyConfigured):
                        create_conf()
