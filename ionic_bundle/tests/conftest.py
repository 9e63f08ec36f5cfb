"""
Pytest fixtures for ionic_bundle tests.
"""

import pytest

from ionic_bundle.descriptors import (
    Bundle, BundleComponent, Component, ComponentMode, ListenOpts, WatchOpts,
)


@pytest.fixture
def my_button():
    """Component with one listener and no watchers (un-normalized tag)."""
    return Component(
        tag=" MyButton ",
        componentClass="MyButton",
        shadow=True,
        listeners={
            "onClick": ListenOpts(eventName="click", capture=False, passive=True, enabled=True),
        },
        watchers={},
    )


@pytest.fixture
def ios_mode():
    return ComponentMode(name="IOS", styles="color:red;")


@pytest.fixture
def plain_component():
    return Component(tag="ion-badge", componentClass="Badge")


@pytest.fixture
def watched_component():
    """Component with several listeners and watchers in a fixed order."""
    return Component(
        tag="ion-range",
        componentClass="Range",
        listeners={
            "onMove": ListenOpts(eventName="touchmove", passive=True),
            "onEnd": ListenOpts(eventName="touchend", capture=True, enabled=False),
        },
        watchers={
            "value": WatchOpts(fn="valueChanged"),
            "disabled": WatchOpts(fn="disabledChanged"),
        },
    )


@pytest.fixture
def bundle_descriptor():
    """JSON form of a two-component bundle, as the compiler writes it."""
    return {
        "components": [
            {
                "component": {
                    "tag": "ion-toggle",
                    "componentClass": "Toggle",
                    "shadow": True,
                    "listeners": {
                        "onTap": {"eventName": "tap", "passive": True},
                    },
                    "watchers": {
                        "checked": {"fn": "checkedChanged"},
                    },
                    "props": {
                        "checked": {"type": "boolean"},
                        "color": {"type": "string"},
                    },
                },
                "mode": {"name": "md", "styles": ".toggle { color: blue; }"},
            },
            {
                "component": {"tag": "ion-badge", "componentClass": "Badge"},
            },
        ]
    }


@pytest.fixture
def two_component_bundle(plain_component, watched_component):
    return Bundle(components=[
        BundleComponent(component=watched_component, mode=ComponentMode(name="ios")),
        BundleComponent(component=plain_component, mode=ComponentMode(name="md", styles="a\nb")),
    ])
