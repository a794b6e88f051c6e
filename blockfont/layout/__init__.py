"""Canvas layout helpers."""

from .alignment import align_block, align_horizontal, align_vertical, cell_width

__all__ = ['align_vertical', 'align_horizontal', 'align_block', 'cell_width']
