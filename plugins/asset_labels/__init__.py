"""Asset labels plugin."""

manifest = {
    "title": "Asset Labels",
    "summary": "Expand compact asset ID lists such as 012-000--012-010,013-005 for label printing.",
    "blueprint": "asset_labels",
    "category": "Inventory Utilities",
}


__all__ = ["manifest"]
