"""Tests for the simulated device-policy target."""

from __future__ import annotations

import json

import pytest

from funcdeck.invocation.outcome import Failure, FailureKind, Success
from funcdeck.registry.catalog import FunctionCatalog
from funcdeck.registry.protocol import ParameterType
from funcdeck.targets.device_policy import (
    DeviceContext,
    DevicePolicyTarget,
    PackageNotFoundError,
    create_target,
)


@pytest.fixture
def context() -> DeviceContext:
    return DeviceContext()


@pytest.fixture
def catalog(context: DeviceContext) -> FunctionCatalog:
    catalog = FunctionCatalog([DevicePolicyTarget(context)])
    catalog.init_function()
    return catalog


def _index(catalog: FunctionCatalog, name: str) -> int:
    return [d.name for d in catalog.descriptors()].index(name)


def test_exposes_marked_functions_in_declaration_order(
    catalog: FunctionCatalog,
) -> None:
    assert [d.name for d in catalog.descriptors()] == [
        "setHomeEnable",
        "isHomeEnabled",
        "setStatusBarEnable",
        "installPackage",
        "uninstallPackage",
        "getInstalledPackages",
        "setVolume",
        "setScreenBrightness",
        "getDeviceInfo",
        "reboot",
    ]
    assert catalog.warnings() == ()
    assert "snapshot" not in catalog


def test_declared_parameter_types(catalog: FunctionCatalog) -> None:
    install = catalog.get("installPackage")
    brightness = catalog.get("setScreenBrightness")

    assert install is not None and brightness is not None
    assert [p.declared_type for p in install.parameters] == [
        ParameterType.STRING,
        ParameterType.LONG,
    ]
    assert install.parameters[1].required is False
    assert brightness.parameters[0].declared_type is ParameterType.DOUBLE


def test_set_home_enable_updates_context(
    catalog: FunctionCatalog, context: DeviceContext
) -> None:
    outcome = catalog.invoke(_index(catalog, "setHomeEnable"), ["false"])

    assert isinstance(outcome, Success)
    assert context.home_enabled is False
    assert catalog.invoke(_index(catalog, "isHomeEnabled")).text == "false"


def test_install_then_uninstall(
    catalog: FunctionCatalog, context: DeviceContext
) -> None:
    installed = catalog.invoke(_index(catalog, "installPackage"), ["com.demo", ""])
    removed = catalog.invoke(_index(catalog, "uninstallPackage"), ["com.demo"])

    assert isinstance(installed, Success)
    assert json.loads(installed.text)["version_code"] == 1
    assert removed == Success(
        function_name="uninstallPackage",
        value="Uninstalled com.demo",
        text="Uninstalled com.demo",
    )
    assert context.packages == {}


def test_uninstall_missing_package_is_execution_error(
    catalog: FunctionCatalog,
) -> None:
    outcome = catalog.invoke(_index(catalog, "uninstallPackage"), ["com.missing"])

    assert isinstance(outcome, Failure)
    assert outcome.kind is FailureKind.EXECUTION_ERROR
    assert isinstance(outcome.cause, PackageNotFoundError)


def test_set_volume_out_of_range(catalog: FunctionCatalog) -> None:
    outcome = catalog.invoke(_index(catalog, "setVolume"), ["16"])

    assert isinstance(outcome, Failure)
    assert outcome.kind is FailureKind.EXECUTION_ERROR
    assert "between 0 and 15" in outcome.message


def test_device_info_is_json(
    catalog: FunctionCatalog, context: DeviceContext
) -> None:
    catalog.invoke(_index(catalog, "setVolume"), ["3"])

    outcome = catalog.invoke(_index(catalog, "getDeviceInfo"))

    assert isinstance(outcome, Success)
    info = json.loads(outcome.text)
    assert info["volume"] == 3
    assert info["device_model"] == context.model


def test_reboot_default_delay(catalog: FunctionCatalog, context: DeviceContext) -> None:
    outcome = catalog.invoke(_index(catalog, "reboot"), [""])

    assert isinstance(outcome, Success)
    assert outcome.text == "Rebooting now"
    assert context.reboot_count == 1


def test_create_target_preinstalls_packages() -> None:
    target = create_target()

    assert target.get_installed_packages() == [
        "com.example.browser",
        "com.example.launcher",
    ]
