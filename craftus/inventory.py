"""Inventory widgets: the quick select bar and the full inventory grid."""

from __future__ import annotations

from typing import Callable, Sequence

from craftus.gui import Gui
from craftus.itemstack import ItemStack
from craftus.spritebatch import GuiTexture, SpriteBatch
from craftus.vertexfmt import shader_rgb, shader_rgb_darken

INVENTORY_QUICKSELECT_MAXSLOTS = 9
INVENTORY_QUICKSELECT_HEIGHT = 22 + 1  # one extra pixel for the selector

SLOT_HIGHLIGHT_COLOR = shader_rgb(20, 5, 2)
ROW_SEPARATOR_COLOR = shader_rgb(7, 7, 7)
_CELL_COLORS = (
    shader_rgb_darken(shader_rgb(20, 20, 21), 9),
    shader_rgb_darken(shader_rgb(20, 20, 21), 8),
)

IconDrawer = Callable[[SpriteBatch, int, int, int, int, int], None]


def quick_select_calc_slots(screen_width: int) -> int:
    """Number of quick select slots that fit into ``screen_width`` pixels."""
    return min(INVENTORY_QUICKSELECT_MAXSLOTS, int((screen_width - 21 * 2) / 20) + 2)


def quick_select_calc_width(slots: int) -> int:
    """Pixel width of a quick select bar with ``slots`` slots."""
    return 42 + (slots - 2) * 20


class InventoryView:
    """Draws inventories and moves items between stacks by tapping them.

    A first tap proposes a stack as the source, a second tap on it picks it
    up, and a tap on another stack moves the items there.
    """

    def __init__(self, icon_drawer: IconDrawer | None = None) -> None:
        self.source_stack: ItemStack | None = None
        self.proposed_source_stack: ItemStack | None = None
        self._icon_drawer = icon_drawer

    def click_at_stack(self, stack: ItemStack) -> None:
        if self.source_stack is None and stack is not self.proposed_source_stack:
            self.proposed_source_stack = stack
        elif self.proposed_source_stack is stack:
            self.source_stack = stack
            self.proposed_source_stack = None
        elif self.source_stack is not None:
            if self.source_stack is not stack:
                self.source_stack.transfer(stack)
            self.source_stack = None

    def _draw_icon(self, batch: SpriteBatch, stack: ItemStack, x: int, y: int, z: int) -> None:
        if stack.amount > 0 and self._icon_drawer is not None:
            self._icon_drawer(batch, stack.block, stack.meta, x, y, z)

    def draw_quick_select(
        self,
        gui: Gui,
        batch: SpriteBatch,
        x: int,
        y: int,
        stacks: Sequence[ItemStack],
        selected: int,
    ) -> int:
        """Draw the quick select bar; returns the slot selected afterwards."""
        count = len(stacks)
        batch.bind_gui_texture(GuiTexture.WIDGETS)
        for i, stack in enumerate(stacks):
            batch.scale = 1
            rx = (i * 20 + x + 3) * 2
            ry = (y + 3) * 2
            self._draw_icon(batch, stack, rx, ry, 11)
            if gui.entered_cursor_inside(rx - 4, ry - 4, 18 * 2, 18 * 2):
                selected = i
                self.click_at_stack(stack)
            batch.scale = 2
            if self.source_stack is stack:
                batch.push_single_color_quad(rx // 2 - 2, ry // 2 - 2, 9, 18, 18, SLOT_HIGHLIGHT_COLOR)
                batch.bind_gui_texture(GuiTexture.WIDGETS)
            if i < count - 2:
                batch.push_quad(i * 20 + 21 + x, y, 10, 20, 22, 21, 0, 20, 22)
        batch.scale = 2

        batch.push_quad(x, y, 10, 21, 22, 0, 0, 21, 22)
        batch.push_quad(21 + 20 * (count - 2) + x, y, 10, 21, 22, 161, 0, 21, 22)
        batch.push_quad(x + selected * 20 - 1, y - 1, 14, 24, 24, 0, 22, 24, 24)
        return selected

    def draw(
        self, gui: Gui, batch: SpriteBatch, x: int, y: int, w: int, stacks: Sequence[ItemStack]
    ) -> None:
        """Draw the stacks as a grid of cells ``w`` pixels wide."""
        batch.scale = 1
        head_x, head_y = x, y
        even = False
        for stack in stacks:
            self._draw_icon(batch, stack, head_x * 2, head_y * 2, 10)
            if gui.entered_cursor_inside(head_x * 2, head_y * 2, 16 * 2, 16 * 2):
                self.click_at_stack(stack)
            color = SLOT_HIGHLIGHT_COLOR if self.source_stack is stack else _CELL_COLORS[int(even)]
            batch.push_single_color_quad(head_x * 2, head_y * 2, 9, 16 * 2, 16 * 2, color)
            even = not even
            head_x += 16
            if head_x >= w:
                head_x = x
                head_y += 17
                even = False
                batch.push_single_color_quad(x * 2, (head_y - 1) * 2, 10, w * 2, 2, ROW_SEPARATOR_COLOR)
        batch.scale = 2