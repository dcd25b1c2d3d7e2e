"""Shared fixtures for the descriptor constraints tests."""

import logging

import pytest


def new_bundle_descriptor():
    """Build a bundle descriptor that satisfies BUNDLE_DESCRIPTOR_CONSTRAINTS."""
    return {
        "name": "test-bundle",
        "description": "test description",
        "version": "0.0.1",
        "type": "bundle",
        "microservices": [
            {
                "name": "test-ms-spring-boot-1",
                "stack": "spring-boot",
                "healthCheckPath": "/api/health",
                "dbms": "postgresql",
                "roles": ["ms1-role1", "ms1-role2"],
                "permissions": [
                    {"clientId": "realm-management", "role": "manage-users"},
                ],
                "env": [
                    {"name": "env1Name", "value": "env1Value"},
                    {
                        "name": "env2Name",
                        "valueFrom": {"secretKeyRef": {"name": "env-2-secret", "key": "env-2-secret-key"}},
                    },
                ],
                "commands": {"build": "mvn package"},
            },
        ],
        "microfrontends": [
            {
                "name": "test-mfe-1",
                "stack": "react",
                "type": "widget",
                "group": "free",
                "titles": {"en": "Widget", "it": "Widget"},
                "publicFolder": "public",
                "apiClaims": [
                    {"name": "ms1-api", "type": "internal", "serviceId": "test-ms-spring-boot-1"},
                    {"name": "ms2-api", "type": "external", "serviceId": "ms2", "bundleId": "abcdefgh"},
                ],
                "nav": [{"label": {"en": "Home"}, "target": "internal", "url": "/home"}],
            },
            {
                "name": "test-mfe-2",
                "stack": "react",
                "type": "app-builder",
                "slot": "primary-header",
                "group": "free",
                "titles": {"en": "Header"},
            },
            {
                "name": "test-mfe-3",
                "stack": "angular",
                "type": "app-builder",
                "slot": "content",
                "paths": ["/content"],
                "group": "free",
                "titles": {"en": "Content"},
            },
        ],
        "svc": ["postgresql"],
        "global": {
            "nav": [{"label": {"en": "Global"}, "target": "external", "url": "https://example.org"}],
        },
    }


@pytest.fixture
def bundle_descriptor():
    return new_bundle_descriptor()


@pytest.fixture(autouse=True)
def restore_package_logging():
    """The CLI reconfigures the package logger; undo it after each test."""
    package_logger = logging.getLogger("descriptor_constraints")
    saved = list(package_logger.handlers), package_logger.level, package_logger.propagate
    yield
    package_logger.handlers[:] = saved[0]
    package_logger.setLevel(saved[1])
    package_logger.propagate = saved[2]
