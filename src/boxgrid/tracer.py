"""
Debug tracing for the grid layout pipeline.

When ``GridPainter.paint`` runs with ``debug=True`` it records what each
stage of the pipeline produced, so a surprising diagram can be taken apart
stage by stage.

Usage:
    >>> painter = GridPainter(GridOptions(limit=2))
    >>> canvas = painter.paint(canvases, paint_lines, debug=True)
    >>> trace = painter.get_trace()
    >>> print(trace.summary())
    >>> trace.dump_to_file("layout_trace.txt")

The trace captures:
- Pipeline stages (blocks, placement, sizing, positions, lines, composed)
- Canvas snapshots where a stage produced one
- One record per final block with its grid and pixel coordinates
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional

from .models import Block


@dataclass
class BlockRecord:
    """
    Final state of one block.

    Attributes:
        id: Block identifier
        row: First row covered
        column: First column covered
        row_span: Rows covered
        column_span: Columns covered
        width: Resolved width across the spanned columns
        height: Resolved height across the spanned rows
        x: Content origin x
        y: Content origin y
        placeholder: Whether the block was synthesized to fill an empty cell
    """

    id: Hashable
    row: int
    column: int
    row_span: int
    column_span: int
    width: int
    height: int
    x: Optional[int]
    y: Optional[int]
    placeholder: bool = False

    @classmethod
    def from_block(cls, block: Block) -> "BlockRecord":
        return cls(
            id=block.id,
            row=block.row,
            column=block.column,
            row_span=block.row_span,
            column_span=block.column_span,
            width=block.width,
            height=block.height,
            x=block.x,
            y=block.y,
            placeholder=block.is_placeholder,
        )

    def __str__(self) -> str:
        kind = " (placeholder)" if self.placeholder else ""
        return (
            f"{self.id!r}{kind}: cell ({self.row},{self.column}) "
            f"span {self.row_span}x{self.column_span} "
            f"size {self.width}x{self.height} at ({self.x},{self.y})"
        )


@dataclass
class PipelineStage:
    """
    Snapshot of state at a pipeline stage.

    Attributes:
        name: Name of this pipeline stage
        data: Dictionary of relevant data at this stage
        canvas_snapshot: Optional list of canvas lines at this point
    """

    name: str
    data: Dict[str, Any]
    canvas_snapshot: Optional[List[str]] = None

    def __str__(self) -> str:
        lines = [f"=== Stage: {self.name} ==="]
        for key, value in self.data.items():
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        if self.canvas_snapshot:
            lines.append("  Canvas preview (first 15 rows):")
            for row in self.canvas_snapshot[:15]:
                lines.append(f"    |{row}|")
        return "\n".join(lines)


@dataclass
class LayoutTrace:
    """
    Complete trace of a grid paint.

    Attributes:
        stages: Pipeline stages in the order they ran
        blocks: Final block records, caller blocks first, then placeholders
        options: The options the grid was painted with
    """

    stages: List[PipelineStage] = field(default_factory=list)
    blocks: List[BlockRecord] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)

    def add_stage(self, name: str, data: Dict[str, Any], canvas: Optional[Any] = None) -> None:
        """
        Add a pipeline stage snapshot.

        Args:
            name: Name of the stage (e.g. "placement")
            data: Dictionary of relevant data at this stage
            canvas: Optional Canvas to snapshot
        """
        snapshot = None
        if canvas is not None:
            rendered = canvas.render()
            snapshot = rendered.split("\n") if rendered else []

        self.stages.append(PipelineStage(name, dict(data), snapshot))

    def add_blocks(self, blocks: List[Block]) -> None:
        self.blocks.extend(BlockRecord.from_block(block) for block in blocks)

    def get_stage(self, name: str) -> Optional[PipelineStage]:
        """Get a specific pipeline stage by name."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def get_canvas_at_stage(self, name: str) -> Optional[List[str]]:
        """Get the canvas snapshot at a specific stage."""
        stage = self.get_stage(name)
        if stage and stage.canvas_snapshot:
            return stage.canvas_snapshot
        return None

    def get_block(self, block_id: Hashable) -> Optional[BlockRecord]:
        """Get the record of the first block with the given id."""
        for record in self.blocks:
            if record.id == block_id:
                return record
        return None

    def summary(self) -> str:
        """Generate a human-readable summary of the trace."""
        placeholders = sum(1 for record in self.blocks if record.placeholder)
        lines = [
            "=" * 60,
            "LAYOUT TRACE SUMMARY",
            "=" * 60,
            "",
            f"Options: {self.options}",
            "",
            f"Pipeline stages: {len(self.stages)}",
        ]

        for stage in self.stages:
            has_canvas = "+" if stage.canvas_snapshot else "-"
            lines.append(f"  [{has_canvas}] {stage.name}")

        lines.extend(
            [
                "",
                f"Blocks: {len(self.blocks) - placeholders}",
                f"Placeholders: {placeholders}",
            ]
        )

        return "\n".join(lines)

    def dump(self) -> str:
        """Generate a complete human-readable dump of the trace."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]

        lines.append("PIPELINE STAGES:")
        lines.append("-" * 40)
        for stage in self.stages:
            lines.append(str(stage))
            lines.append("")

        lines.append("BLOCKS:")
        lines.append("-" * 40)
        for record in self.blocks:
            lines.append(str(record))

        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
