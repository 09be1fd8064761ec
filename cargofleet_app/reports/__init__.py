"""
Reporting utilities (text and tabular manifests) for cargofleet.
"""

from cargofleet_app.reports.simple_text_report import build_fleet_info_text, build_ship_info_text
from cargofleet_app.reports.manifest import fleet_manifest_frame, ship_manifest_frame

__all__ = [
    "build_ship_info_text",
    "build_fleet_info_text",
    "ship_manifest_frame",
    "fleet_manifest_frame",
]
