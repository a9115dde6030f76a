# craftus

The game logic of a small block-building sandbox. It is a plain library, so
you can drive it and test it without graphics hardware.

## What is in it

- **Blocks and chunks**
  - `craftus.block`: the `Block` enumeration. It also has `block_name`,
    `block_color`, `block_opaque` and `texture_file`.
  - `craftus.chunk`: `Chunk` is a 16×128×16 column made of eight `Cluster`s.
    It stores blocks and metadata and counts revisions.
  - `craftus.blockevent`: `random_tick` turns uncovered dirt into grass and
    covered grass into dirt.
  - `craftus.itemstack`: `ItemStack` holds stacks of up to 64. Its `transfer`
    method merges two stacks of the same kind and swaps stacks of different kinds.
- **Maths helpers**
  - `craftus.vecmath`: the immutable `Float3` vector.
  - `craftus.mathutil`: `fast_floor`, `lerp`, `bilerp`, `trilerp`,
    `aabb_overlap` and `clamp`.
  - `craftus.xorshift`: the `Xorshift32` and `Xorshift64` generators.
  - `craftus.direction`: `Direction` and `Axis`, with offsets, opposites and axes.
  - `craftus.collision`: `Box` and `box_intersect`.
  - `craftus.coords`: conversions between world, chunk and superchunk coordinates.
  - `craftus.vertexfmt`: packing of 15-bit colours.
- **Player simulation**
  - `craftus.player`: `Player` simulates gravity, collision with blocks,
    auto-jump, flying and crouching in fixed 1/60 s steps. It also places and
    breaks blocks.
  - `craftus.raycast`: `cast` walks the voxel grid to find the block in view.
  - `craftus.commandline`: `CommandLine` runs `/tp x y z` and the `/d` debug toggle.
- **Work queue**
  - `craftus.workqueue`: `WorkQueue` is a thread-safe FIFO of `WorkerItem`
    chunk jobs. It raises each chunk's task counters when a job is queued.
- **Input**
  - `craftus.inputdata`: `InputData` and the `KeyBits` button masks.
  - `craftus.playercontroller`:
    - `convert_input` maps raw key masks and stick positions onto `Key` values.
    - `ControlScheme` binds those keys to actions. It comes with a default and
      a New 3DS default.
    - `load_options` and `write_options` read and write an INI options file.
    - `PlayerController` drives a `Player` from one frame of input at a time.
- **GUI**
  - `craftus.spritebatch`: `SpriteBatch` collects textured quads and text.
    `render()` returns lists of `GuiVertex` per texture, sorted by depth.
  - `craftus.gui`: `Gui` is an immediate-mode layout with rows, labels and
    buttons, driven by touch input.
  - `craftus.debugui`: `DebugUI` shows status lines and a scrolling log.
  - `craftus.inventory`: `InventoryView` draws the quick select bar and the
    inventory grid, and moves items between stacks by tapping them.
  - `craftus.fontloader`: `load_font` reads a 128 px wide font sheet with
    Pillow. It measures the glyph widths and converts the pixels to RGBA5551.
  - `craftus.worldselect`: `WorldSelect` is the world menu.
    - It lists worlds with `scan_worlds`, from each folder's msgpack `level.mp`
      file.
    - It creates worlds through a name prompt callable, with
      `sanitize_world_path` and `unique_world_path`.
    - It deletes worlds with `delete_folder`.

## Installation

```
pip install .
```

To install the test dependencies as well, run `pip install .[test]`.

## Example

```python
from craftus.block import Block
from craftus.chunk import Chunk
from craftus.itemstack import ItemStack
from craftus.vecmath import Float3

chunk = Chunk(0, 0)
chunk.set_block(1, 64, 1, Block.GRASS)
assert chunk.get_block(1, 64, 1) == Block.GRASS

src = ItemStack(Block.STONE, 0, 10)
dst = ItemStack(Block.STONE, 0, 60)
src.transfer(dst)          # dst is now full at 64, src keeps 6

v = Float3(3.0, 0.0, 4.0)
print(v.magnitude())       # 5.0
```

## What it does not do

The package has no world object of its own. `Player` and `cast` work with any
object that provides `get_block` (plus `set_block` and `set_block_and_meta`
for placing and breaking), so you supply the world.

The package does not include:

- chunk caching and loading;
- terrain generation;
- saving chunks to disk;
- a worker thread that consumes the `WorkQueue`;
- 3D rendering;
- a game loop or command-line program.

The GUI classes produce sprite and vertex data only. They do not draw to a
screen. Prompts for text, such as commands and world names, are callables
that you pass in.

## Tests

```
pytest
```