"""Device-management functions against a simulated device.

The target mirrors a device-policy API surface (home button lock, package
management, volume, brightness). All state lives in a DeviceContext injected
at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict

from funcdeck.registry.marker import invokable
from funcdeck.registry.protocol import ParameterType

MAX_VOLUME = 15


class PackageNotFoundError(Exception):
    """No package with the given name is installed."""

    def __init__(self, package_name: str) -> None:
        self.package_name = package_name
        super().__init__(f"Package not installed: {package_name}")


@dataclass(frozen=True, slots=True)
class InstalledPackage:
    package_name: str
    version_code: int
    installed_at: datetime


class DeviceInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    device_model: str
    os_version: str
    serial: str
    home_enabled: bool
    status_bar_enabled: bool
    volume: int
    brightness: float
    package_count: int
    reboot_count: int


@dataclass(slots=True)
class DeviceContext:
    """Mutable state of the simulated device shared by its targets."""

    model: str = "FD-100"
    os_version: str = "14"
    serial: str = "FD100-0001"
    home_enabled: bool = True
    status_bar_enabled: bool = True
    volume: int = 7
    brightness: float = 0.5
    reboot_count: int = 0
    packages: dict[str, InstalledPackage] = field(default_factory=dict)


class DevicePolicyTarget:
    """Device-policy operations exposed to the function catalog."""

    target_name = "device_policy"

    def __init__(self, context: DeviceContext) -> None:
        self._context = context

    @property
    def context(self) -> DeviceContext:
        return self._context

    @invokable(name="setHomeEnable")
    def set_home_enable(self, enable: bool) -> None:
        """Enable or disable the home button."""
        self._context.home_enabled = enable

    @invokable(name="isHomeEnabled")
    def is_home_enabled(self) -> bool:
        return self._context.home_enabled

    @invokable(name="setStatusBarEnable")
    def set_status_bar_enable(self, enable: bool) -> None:
        """Allow or block pulling down the status bar."""
        self._context.status_bar_enabled = enable

    @invokable(name="installPackage")
    def install_package(
        self,
        package_name: str,
        version_code: Annotated[int, ParameterType.LONG] = 1,
    ) -> InstalledPackage:
        """Install (or upgrade) a package."""
        if not package_name.strip():
            raise ValueError("package_name must not be blank")
        package = InstalledPackage(
            package_name=package_name,
            version_code=version_code,
            installed_at=datetime.now(UTC),
        )
        self._context.packages[package_name] = package
        return package

    @invokable(name="uninstallPackage")
    def uninstall_package(self, package_name: str) -> str:
        """Remove an installed package."""
        if package_name not in self._context.packages:
            raise PackageNotFoundError(package_name)
        del self._context.packages[package_name]
        return f"Uninstalled {package_name}"

    @invokable(name="getInstalledPackages")
    def get_installed_packages(self) -> list[str]:
        return sorted(self._context.packages)

    @invokable(name="setVolume")
    def set_volume(self, level: int) -> int:
        """Set the media volume (0..15) and return it."""
        if not 0 <= level <= MAX_VOLUME:
            raise ValueError(f"volume must be between 0 and {MAX_VOLUME}")
        self._context.volume = level
        return level

    @invokable(name="setScreenBrightness")
    def set_screen_brightness(
        self, level: Annotated[float, ParameterType.DOUBLE]
    ) -> float:
        """Set screen brightness as a fraction (0.0..1.0)."""
        if not 0.0 <= level <= 1.0:
            raise ValueError("brightness must be between 0.0 and 1.0")
        self._context.brightness = level
        return level

    @invokable(name="getDeviceInfo")
    def get_device_info(self) -> DeviceInfo:
        ctx = self._context
        return DeviceInfo(
            device_model=ctx.model,
            os_version=ctx.os_version,
            serial=ctx.serial,
            home_enabled=ctx.home_enabled,
            status_bar_enabled=ctx.status_bar_enabled,
            volume=ctx.volume,
            brightness=ctx.brightness,
            package_count=len(ctx.packages),
            reboot_count=ctx.reboot_count,
        )

    @invokable(name="reboot")
    def reboot(self, delay_seconds: int = 0) -> str:
        """Simulate a reboot, optionally delayed."""
        if delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative")
        self._context.reboot_count += 1
        if delay_seconds:
            return f"Reboot scheduled in {delay_seconds}s"
        return "Rebooting now"

    def snapshot(self) -> DeviceInfo:
        # Not marked: internal helper, never listed.
        return self.get_device_info()


def create_target() -> DevicePolicyTarget:
    """Build a target on a fresh simulated device with stock packages."""
    context = DeviceContext()
    target = DevicePolicyTarget(context)
    for package_name in ("com.example.launcher", "com.example.browser"):
        target.install_package(package_name)
    return target
