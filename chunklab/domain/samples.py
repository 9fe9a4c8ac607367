"""Bundled sample documents for trying out the chunking strategies."""

from typing import Dict, List

from chunklab.schemas import SampleInfo

CONSTRUCTION_SPEC = """SECTION 09 91 00 - PAINTING

PART 1 - GENERAL

1.1 SUMMARY
A. Section Includes: Painting of interior and exterior surfaces including preparation of surfaces for painting.
B. Related Requirements: Section 09 29 00 - Gypsum Board for substrate requirements.

1.2 REFERENCES
A. American Society for Testing and Materials (ASTM):
   1. ASTM D3276 - Standard Guide for Painting Inspectors (Metal Substrates)
   2. ASTM D4258 - Standard Practice for Surface Cleaning Concrete

1.3 SUBMITTALS
A. Product Data: Submit manufacturer's technical data for each paint product including preparation requirements and application instructions.
B. Samples: Submit samples of each color and finish specified.

PART 2 - PRODUCTS

2.1 MANUFACTURERS
A. Acceptable Manufacturers: Benjamin Moore, Sherwin-Williams, or approved equal.

2.2 MATERIALS
A. Interior Latex Paint:
   1. Primer: Water-based acrylic primer sealer
   2. Finish Coat: 100% acrylic latex, semi-gloss finish
   3. VOC Content: Maximum 50 grams per liter

B. Exterior Acrylic Paint:
   1. Base: 100% acrylic latex
   2. Finish: Satin finish
   3. Weather Resistance: Minimum 10-year warranty

PART 3 - EXECUTION

3.1 EXAMINATION
A. Examine surfaces to be painted and verify that surfaces are ready to receive work.
B. Report any defects or damage to surfaces. Do not begin work until defects are corrected.

3.2 PREPARATION
A. Clean surfaces thoroughly. Remove dust, dirt, oil, and grease.
B. Fill cracks and holes with appropriate filler material.
C. Sand smooth all filled areas and previously painted surfaces.

3.3 APPLICATION
A. Apply primer coat to all surfaces. Allow to dry completely before applying finish coats.
B. Apply finish coats in accordance with manufacturer's instructions.
C. Minimum dry film thickness: 1.5 mils per coat."""

DRAWING_NOTE = """GENERAL NOTES:

1. ALL WORK SHALL CONFORM TO APPLICABLE BUILDING CODES AND REGULATIONS.

2. CONTRACTOR SHALL VERIFY ALL DIMENSIONS IN FIELD BEFORE PROCEEDING WITH WORK.

3. MECHANICAL EQUIPMENT LOCATIONS:
   - HVAC UNITS: ROOF LEVEL, SEE SHEET M-201
   - ELECTRICAL PANELS: BASEMENT LEVEL, SEE SHEET E-101
   - PLUMBING RISERS: AS SHOWN ON EACH FLOOR PLAN

4. CEILING HEIGHTS:
   - TYPICAL OFFICE: 9'-0" ABOVE FINISHED FLOOR
   - CORRIDOR: 8'-6" ABOVE FINISHED FLOOR
   - MECHANICAL ROOM: 10'-0" ABOVE FINISHED FLOOR

5. FIRE PROTECTION: ALL AREAS SHALL BE FULLY SPRINKLERED PER NFPA 13."""

SAMPLES: Dict[str, str] = {
    "construction_spec": CONSTRUCTION_SPEC,
    "drawing_note": DRAWING_NOTE,
}

SAMPLE_TITLES: Dict[str, str] = {
    "construction_spec": "Construction specification (Section 09 91 00)",
    "drawing_note": "Drawing general notes",
}

DEFAULT_SAMPLE = "construction_spec"


def get_sample(name: str) -> str:
    """Return the sample text; raises KeyError for unknown names."""
    if name not in SAMPLES:
        raise KeyError(name)
    return SAMPLES[name]


def list_samples() -> List[SampleInfo]:
    return [
        SampleInfo(name=name, title=SAMPLE_TITLES[name], length=len(text))
        for name, text in SAMPLES.items()
    ]
