from craftus.block import Block
from craftus.itemstack import ITEMSTACK_MAX, ItemStack


def test_is_empty():
    assert ItemStack().is_empty()
    assert not ItemStack(Block.STONE, 0, 1).is_empty()


def test_transfer_same_kind_merges():
    src = ItemStack(Block.STONE, 0, 3)
    dst = ItemStack(Block.STONE, 0, 5)
    src.transfer(dst)
    assert dst.amount == 3 + 5
    assert src.is_empty()


def test_transfer_respects_stack_limit():
    src = ItemStack(Block.DIRT, 0, 40)
    dst = ItemStack(Block.DIRT, 0, 40)
    src.transfer(dst)
    assert dst.amount == ITEMSTACK_MAX
    assert src.amount + dst.amount == 80


def test_transfer_into_empty_adopts_kind():
    src = ItemStack(Block.WOOL, 7, 10)
    dst = ItemStack(Block.STONE, 2, 0)
    src.transfer(dst)
    assert (dst.block, dst.meta, dst.amount) == (Block.WOOL, 7, 10)
    assert src.is_empty()


def test_transfer_different_kinds_swaps():
    src = ItemStack(Block.SAND, 0, 2)
    dst = ItemStack(Block.GLASS, 0, 9)
    src.transfer(dst)
    assert (src.block, src.amount) == (Block.GLASS, 9)
    assert (dst.block, dst.amount) == (Block.SAND, 2)


def test_different_meta_counts_as_different_kind():
    src = ItemStack(Block.WOOL, 1, 4)
    dst = ItemStack(Block.WOOL, 2, 6)
    src.transfer(dst)
    assert (src.meta, src.amount) == (2, 6)
    assert (dst.meta, dst.amount) == (1, 4)