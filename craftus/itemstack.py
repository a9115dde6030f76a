"""Stacks of blocks held in inventories."""

from __future__ import annotations

from dataclasses import dataclass

from craftus.block import Block

ITEMSTACK_MAX = 64


@dataclass(eq=False)
class ItemStack:
    block: int = Block.AIR
    meta: int = 0
    amount: int = 0

    def is_empty(self) -> bool:
        return self.amount == 0

    def transfer(self, dst: ItemStack) -> None:
        """Move as much as fits into ``dst``, or swap when the kinds differ."""
        if (self.block == dst.block and self.meta == dst.meta) or dst.amount == 0:
            volume = min(self.amount, ITEMSTACK_MAX - dst.amount)
            self.amount -= volume
            dst.amount += volume
            dst.block = self.block
            dst.meta = self.meta
        else:
            self.block, dst.block = dst.block, self.block
            self.meta, dst.meta = dst.meta, self.meta
            self.amount, dst.amount = dst.amount, self.amount