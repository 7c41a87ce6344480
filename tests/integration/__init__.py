"""Integration tests.

Purpose
- Exercise real interactions with external systems (the local filesystem).

Guidelines
- Use realistic configuration and setup/teardown per test or suite.
- Minimize mocking; prefer real directories under `tmp_path`.
- Mark as 'integration' and keep them slower but reliable.
"""
