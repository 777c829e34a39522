import unittest
from unittest import mock

from s3config.exceptions import ConfigurationSourceError, UnknownRegionError
from s3config.settings import (
    AWS_REGION_ENV_VAR,
    AWS_S3_ENDPOINT_ENV_VAR,
    ClientConfig,
    known_regions,
)

REGIONS = {"us-east-1", "us-west-2", "eu-west-1"}


class ClientConfigTests(unittest.TestCase):
    def test_no_overrides(self):
        config = ClientConfig.from_environ({}, regions=REGIONS)
        self.assertIsNone(config.endpoint_override)
        self.assertIsNone(config.region_override)
        self.assertFalse(config.path_style_access)
        self.assertIsNone(config.botocore_config())
        self.assertEqual(config.client_kwargs(), {})

    def test_endpoint_override_forces_path_style(self):
        config = ClientConfig.from_environ(
            {AWS_S3_ENDPOINT_ENV_VAR: "http://localhost:9999"}, regions=REGIONS
        )
        self.assertEqual(config.endpoint_override, "http://localhost:9999")
        self.assertTrue(config.path_style_access)

        kwargs = config.client_kwargs()
        self.assertEqual(kwargs["endpoint_url"], "http://localhost:9999")
        self.assertEqual(kwargs["config"].s3, {"addressing_style": "path"})
        self.assertNotIn("region_name", kwargs)

    def test_endpoint_override_ignores_region(self):
        environ = {
            AWS_S3_ENDPOINT_ENV_VAR: "http://localhost:9999",
            AWS_REGION_ENV_VAR: "not-a-real-region",
        }
        config = ClientConfig.from_environ(environ, regions=REGIONS)
        self.assertEqual(config.endpoint_override, "http://localhost:9999")
        self.assertIsNone(config.region_override)

    def test_region_override(self):
        config = ClientConfig.from_environ({AWS_REGION_ENV_VAR: "us-west-2"}, regions=REGIONS)
        self.assertEqual(config.region_override, "us-west-2")
        self.assertFalse(config.path_style_access)
        self.assertEqual(config.client_kwargs(), {"region_name": "us-west-2"})

    def test_unknown_region_is_fatal(self):
        with self.assertRaises(UnknownRegionError) as ctx:
            ClientConfig.from_environ({AWS_REGION_ENV_VAR: "not-a-real-region"}, regions=REGIONS)
        self.assertIn("not-a-real-region", str(ctx.exception))
        self.assertNotIsInstance(ctx.exception, ConfigurationSourceError)

    def test_reads_process_environment_by_default(self):
        with mock.patch.dict("os.environ", {AWS_S3_ENDPOINT_ENV_VAR: "http://minio:9000"}):
            config = ClientConfig.from_environ(regions=REGIONS)
        self.assertEqual(config.endpoint_override, "http://minio:9000")


class KnownRegionsTests(unittest.TestCase):
    def test_contains_standard_regions(self):
        regions = known_regions()
        self.assertIn("us-west-2", regions)
        self.assertIn("eu-west-1", regions)
        self.assertNotIn("not-a-real-region", regions)

    def test_default_lookup_validates_region(self):
        config = ClientConfig.from_environ({AWS_REGION_ENV_VAR: "us-west-2"})
        self.assertEqual(config.region_override, "us-west-2")
        with self.assertRaises(UnknownRegionError):
            ClientConfig.from_environ({AWS_REGION_ENV_VAR: "not-a-real-region"})


if __name__ == "__main__":
    unittest.main()
