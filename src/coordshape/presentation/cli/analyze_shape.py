"""Command-line interface for coordination shape analysis."""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from ...core.domain.models.analysis import CoordinationAnalysis
from ...core.exceptions import ShapeAnalysisError
from ...core.optimization.settings import MODE_PRESETS, OptimizerSettings
from ...core.services.coordination_analysis_service import CoordinationAnalysisService
from ...core.services.pattern_detection_service import pattern_scores_table
from ...core.utils.coordination_sphere import select_coordination_sphere
from ...infrastructure.adapters.pdb_adapter import PDBAtomReader
from ...infrastructure.repositories.reference_geometry_repository import (
    ReferenceGeometryRepository,
)

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Rank ideal coordination geometries by continuous shape measure"
    )
    parser.add_argument("pdb_file", help="PDB file containing the complex")
    parser.add_argument(
        "--metal-index",
        type=int,
        required=True,
        help="Zero-based index of the metal atom in file order",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=3.0,
        help="Coordination sphere cutoff (Angstroms)",
    )
    parser.add_argument(
        "--mode",
        choices=sorted(MODE_PRESETS),
        default="default",
        help="Search effort",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--workers", type=int, default=1, help="Worker processes for ranking"
    )
    parser.add_argument(
        "--top", type=int, default=10, help="Number of ranked geometries to print"
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress details")
    return parser


def format_report(analysis: CoordinationAnalysis, top: int = 10) -> str:
    """Plain-text summary of an analysis."""
    groups = analysis.ligand_groups
    lines = [
        f"Metal: {analysis.metal_element} (atom {analysis.metal_index})",
        f"Pattern: {analysis.detection.pattern_type.value} "
        f"(CN={analysis.coordination_number}, mode={analysis.mode}, "
        f"{analysis.elapsed_seconds:.1f}s)",
        "Pattern scores: "
        + ", ".join(
            f"{name}={score:.2f}"
            for name, score in pattern_scores_table(analysis.detection).items()
        ),
        f"Ligand groups: {groups.ring_count} ring(s), "
        f"{groups.monodentate_count} monodentate",
    ]
    for ring in groups.rings:
        lines.append(
            f"  {ring.hapticity} ring atoms {list(ring.atom_indices)} "
            f"at {ring.distance_to_metal:.3f} A"
        )

    lines.append("")
    lines.append(f"{'Rank':<6}{'Code':<12}{'Geometry':<36}{'CShM':>10}")
    for rank, result in enumerate(analysis.ranking.results[:top], start=1):
        lines.append(
            f"{rank:<6}{result.geometry_code:<12}{result.geometry_name:<36}"
            f"{result.measure:>10.4f}"
        )
    for skipped in analysis.ranking.skipped:
        lines.append(f"  skipped {skipped.name}: {skipped.reason}")

    quality = analysis.quality
    if quality is not None:
        bonds, angles = quality.bond_lengths, quality.angles
        lines.append("")
        lines.append(
            f"Quality: score {quality.quality_score:.1f}/100, "
            f"shape deviation {quality.shape_deviation:.4f}, "
            f"angular distortion {quality.angular_distortion:.2f} deg"
        )
        lines.append(
            f"Bond lengths: mean {bonds.mean:.3f} A, std {bonds.std:.3f}, "
            f"range {bonds.minimum:.3f}-{bonds.maximum:.3f}, "
            f"uniformity {quality.bond_length_uniformity:.1f}%"
        )
        lines.append(
            f"Angles: {angles.count} pairs, mean {angles.mean:.1f}, "
            f"range {angles.minimum:.1f}-{angles.maximum:.1f} deg"
        )

    if analysis.comparison is not None and analysis.comparison.results:
        lines.append("")
        lines.append("Comparison (all geometries for this CN):")
        for result in analysis.comparison.results[:top]:
            lines.append(
                f"      {result.geometry_code:<12}{result.geometry_name:<36}"
                f"{result.measure:>10.4f}"
            )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the shape analysis CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    settings = OptimizerSettings.from_mode(args.mode, seed=args.seed)
    repository = ReferenceGeometryRepository()
    service = CoordinationAnalysisService(repository, settings, max_workers=args.workers)

    try:
        atoms = PDBAtomReader().read(args.pdb_file)
        coordinating = select_coordination_sphere(atoms, args.metal_index, args.radius)

        with tqdm(desc="Evaluating geometries", unit="geom", disable=not sys.stderr.isatty()) as pbar:
            analysis = service.analyze(
                atoms,
                args.metal_index,
                coordinating,
                result_callback=lambda reference, result: pbar.update(1),
            )
    except (ShapeAnalysisError, OSError) as e:
        logger.error("%s", e)
        sys.exit(1)

    print(format_report(analysis, top=args.top))


if __name__ == "__main__":
    main()
