"""Test package for vite-manifest.

- **unit/**: Unit tests for individual functions and classes
  - test_schemas.py: ChunkRecord / TagSet schema tests
  - test_manifest_loader.py: Manifest file loading and cache tests
  - test_manifest_resolver.py: Graph resolution and tag rendering tests
  - test_preload_types.py: Preload type registry tests
  - test_settings.py: Configuration tests
  - test_cli.py: Command line tool tests

Run with: pytest tests/
"""
