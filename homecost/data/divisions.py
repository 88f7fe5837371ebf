"""Construction division labels and the room-category division map."""

from __future__ import annotations

from homecost.models.enums import Division

DIVISION_LABELS: dict[Division, str] = {
    Division.SITEWORK: "Site Work",
    Division.FOUNDATION: "Foundation",
    Division.FRAMING: "Framing & Structure",
    Division.EXTERIOR: "Exterior Envelope",
    Division.ROOFING: "Roofing",
    Division.DOORS_WINDOWS: "Doors & Windows",
    Division.INTERIOR_FINISHES: "Interior Finishes",
    Division.MECHANICAL: "Mechanical (Plumbing & HVAC)",
    Division.ELECTRICAL: "Electrical & Lighting",
    Division.SPECIALTIES: "Specialty Items",
    Division.OVERHEAD: "Design, Survey & Overhead",
}

# Division for each room-wizard material category. Categories not listed
# here are reported under interior finishes.
CATEGORY_DIVISIONS: dict[str, Division] = {
    "appliances": Division.INTERIOR_FINISHES,
    "backsplash": Division.INTERIOR_FINISHES,
    "baseboard": Division.INTERIOR_FINISHES,
    "cabinets": Division.INTERIOR_FINISHES,
    "ceiling": Division.INTERIOR_FINISHES,
    "closets": Division.INTERIOR_FINISHES,
    "countertops": Division.INTERIOR_FINISHES,
    "doors": Division.DOORS_WINDOWS,
    "driveway": Division.SITEWORK,
    "drywall": Division.INTERIOR_FINISHES,
    "electrical": Division.ELECTRICAL,
    "exterior_paint": Division.EXTERIOR,
    "fireplace": Division.SPECIALTIES,
    "fixtures": Division.MECHANICAL,
    "flooring": Division.INTERIOR_FINISHES,
    "foundation": Division.FOUNDATION,
    "front_door": Division.DOORS_WINDOWS,
    "garage_door": Division.DOORS_WINDOWS,
    "hardware": Division.INTERIOR_FINISHES,
    "hvac": Division.MECHANICAL,
    "insulation": Division.ROOFING,
    "landscaping": Division.SITEWORK,
    "lighting": Division.ELECTRICAL,
    "outdoor_lighting": Division.SITEWORK,
    "paint": Division.INTERIOR_FINISHES,
    "plumbing": Division.MECHANICAL,
    "pool": Division.SPECIALTIES,
    "roofing": Division.ROOFING,
    "shower_enclosure": Division.INTERIOR_FINISHES,
    "siding": Division.EXTERIOR,
    "smart_home": Division.SPECIALTIES,
    "structural_framing": Division.FRAMING,
    "tile": Division.INTERIOR_FINISHES,
    "toilets": Division.MECHANICAL,
    "trim": Division.INTERIOR_FINISHES,
    "vanity": Division.INTERIOR_FINISHES,
    "windows": Division.DOORS_WINDOWS,
}


def division_for_category(category: str) -> Division:
    return CATEGORY_DIVISIONS.get(category, Division.INTERIOR_FINISHES)
