"""The player entity: movement physics, view and block interaction."""

from __future__ import annotations

import math
from typing import Protocol

from craftus.block import Block
from craftus.collision import Box, box_intersect
from craftus.itemstack import ItemStack
from craftus.mathutil import aabb_overlap, fast_floor
from craftus.raycast import RaycastResult, cast
from craftus.vecmath import Float3

PLAYER_EYEHEIGHT = 1.65
PLAYER_HEIGHT = 1.8
PLAYER_COLLISIONBOX_SIZE = 0.65
PLAYER_HALFEYEDIFF = 0.07
PLAYER_PLACE_REPLACE_TIMEOUT = 0.2

QUICKSELECT_MAXSLOTS = 9
INVENTORY_SIZE = 12 + 16

MAX_WALK_VELOCITY = 4.3
MAX_FALL_VELOCITY = -50.0
GRAVITY_PLUS_FRICTION = 10.0
SIM_STEP = 1.0 / 60.0
ACTION_RANGE_SQR = 5.0 * 5.0 * 5.0

_HALF_BOX = PLAYER_COLLISIONBOX_SIZE / 2.0


class WorldAccess(Protocol):
    def get_block(self, x: int, y: int, z: int) -> int: ...

    def set_block(self, x: int, y: int, z: int, block: int) -> None: ...

    def set_block_and_meta(self, x: int, y: int, z: int, block: int, metadata: int) -> None: ...


def _starting_inventory() -> list[ItemStack]:
    blocks = [
        Block.STONE,
        Block.DIRT,
        Block.GRASS,
        Block.COBBLESTONE,
        Block.SAND,
        Block.LOG,
        Block.LEAVES,
        Block.GLASS,
        Block.STONEBRICK,
        Block.BRICK,
        Block.PLANKS,
    ]
    stacks = [ItemStack(block, 0, 1) for block in blocks]
    stacks.extend(ItemStack(Block.WOOL, meta, 1) for meta in range(16))
    stacks.append(ItemStack(Block.BEDROCK, 0, 1))
    return stacks


class Player:
    def __init__(self, world: WorldAccess | None) -> None:
        self.world = world
        self.position = Float3(0.0, 0.0, 0.0)
        self.pitch = 0.0
        self.yaw = 0.0
        self.bobbing = 0.0
        self.fov_add = 0.0
        self.crouch_add = 0.0
        self.grounded = False
        self.jumped = False
        self.sprinting = False
        self.flying = False
        self.crouching = False
        self.view = Float3(0.0, 0.0, -1.0)
        self.auto_jump_enabled = True
        self.velocity = Float3(0.0, 0.0, 0.0)
        self.sim_step_accum = 0.0
        self.break_place_timeout = 0.0
        self.inventory = _starting_inventory()
        self.quick_select_bar_slots = QUICKSELECT_MAXSLOTS
        self.quick_select_bar_slot = 0
        self.quick_select_bar = [ItemStack() for _ in range(QUICKSELECT_MAXSLOTS)]
        self.view_raycast = RaycastResult()
        self.block_in_sight = False
        self.block_in_action_range = False

    def update(self) -> None:
        """Recompute the view vector and the block being looked at."""
        cos_pitch = math.cos(self.pitch)
        self.view = Float3(
            -math.sin(self.yaw) * cos_pitch,
            math.sin(self.pitch),
            -math.cos(self.yaw) * cos_pitch,
        )
        if self.world is None:
            self.block_in_sight = False
            self.block_in_action_range = False
            return
        eye = Float3(self.position.x, self.position.y + PLAYER_EYEHEIGHT, self.position.z)
        self.view_raycast = cast(self.world, eye, self.view)
        self.block_in_sight = self.view_raycast.hit
        self.block_in_action_range = (
            self.block_in_sight and self.view_raycast.dist_sqr < ACTION_RANGE_SQR
        )

    def _solid_blocks_around(self, pos: Float3):
        bx, by, bz = fast_floor(pos.x), fast_floor(pos.y), fast_floor(pos.z)
        for dx in (-1, 0, 1):
            for dy in (0, 1, 2):
                for dz in (-1, 0, 1):
                    p = (bx + dx, by + dy, bz + dz)
                    if self.world.get_block(*p) != Block.AIR:
                        yield p

    def can_move(self, x: float, y: float, z: float) -> bool:
        """Whether the player's box fits at the given feet position."""
        return not any(
            aabb_overlap(
                x - _HALF_BOX, y, z - _HALF_BOX,
                PLAYER_COLLISIONBOX_SIZE, PLAYER_HEIGHT, PLAYER_COLLISIONBOX_SIZE,
                px, py, pz, 1.0, 1.0, 1.0,
            )
            for px, py, pz in self._solid_blocks_around(Float3(x, y, z))
        )

    def jump(self, accl: Float3) -> None:
        if self.grounded and not self.flying:
            self.velocity = Float3(accl.x * 1.1, 6.7, accl.z * 1.1)
            self.jumped = True
            self.crouching = False

    def _collides(self, pos: Float3) -> bool:
        player_box = Box.create(
            pos.x - _HALF_BOX, pos.y, pos.z - _HALF_BOX,
            PLAYER_COLLISIONBOX_SIZE, PLAYER_HEIGHT, PLAYER_COLLISIONBOX_SIZE,
        )
        return any(
            box_intersect(Box.create(px, py, pz, 1, 1, 1), player_box) is not None
            for px, py, pz in self._solid_blocks_around(pos)
        )

    def move(self, dt: float, accl: Float3) -> None:
        """Advance the physics by ``dt`` seconds in fixed steps."""
        self.break_place_timeout -= dt
        self.sim_step_accum += dt
        while self.sim_step_accum >= SIM_STEP:
            vy = max(self.velocity.y - GRAVITY_PLUS_FRICTION * SIM_STEP * 2.0, MAX_FALL_VELOCITY)
            if self.flying:
                vy = 0.0
            self.velocity = self.velocity.replace_axis(1, vy)

            speed_factor = 1.0
            if not self.grounded and not self.flying:
                speed_factor = 0.2 if self.jumped else 0.6
            elif self.flying:
                speed_factor = 2.0
            elif self.crouching:
                speed_factor = 0.5

            new_pos = (
                self.position
                + self.velocity.scale(SIM_STEP)
                + accl.scale(SIM_STEP * speed_factor)
            )
            final_pos = self.position
            wall_collision = False
            was_grounded = self.grounded
            self.grounded = False

            for axis in (0, 2, 1):
                axis_step = final_pos.replace_axis(axis, new_pos[axis])
                if not self._collides(axis_step):
                    final_pos = axis_step
                elif axis == 1:
                    if self.velocity.y < 0.0 or accl.y < 0.0:
                        self.grounded = True
                    self.jumped = False
                    self.velocity = Float3(0.0, 0.0, 0.0)
                else:
                    wall_collision = True
                    self.velocity = self.velocity.replace_axis(axis, 0.0)

            mov_diff = final_pos - self.position

            if self.grounded and self.flying:
                self.flying = False

            if wall_collision and self.auto_jump_enabled:
                diff = new_pos - self.position
                if diff.magnitude_sqr() > 0.0:
                    nrm = diff.normalized()
                    tx = fast_floor(final_pos.x + nrm.x)
                    ty = fast_floor(final_pos.y + nrm.y)
                    tz = fast_floor(final_pos.z + nrm.z)
                    head = self.world.get_block(tx, ty + 2, tz)
                    landing = self.world.get_block(tx, ty + 1, tz)
                    if head == Block.AIR and landing != Block.AIR:
                        self.jump(accl)

            if self.crouching and self.crouch_add > -0.3:
                self.crouch_add -= SIM_STEP * 2.0
            if not self.crouching and self.crouch_add < 0.0:
                self.crouch_add += SIM_STEP * 2.0

            if (
                self.crouching
                and not self.grounded
                and was_grounded
                and final_pos.y < self.position.y
                and mov_diff.x != 0.0
                and mov_diff.z != 0.0
            ):
                final_pos = self.position
                self.grounded = True
                self.velocity = self.velocity.replace_axis(1, 0.0)

            self.position = final_pos
            vx = self.velocity.x * 0.95
            vz = self.velocity.z * 0.95
            if abs(vx) < 0.1:
                vx = 0.0
            if abs(vz) < 0.1:
                vz = 0.0
            self.velocity = Float3(vx, self.velocity.y, vz)

            self.sim_step_accum -= SIM_STEP

    def place_block(self) -> None:
        """Place the selected block against the face being looked at."""
        if self.world is not None and self.block_in_action_range and self.break_place_timeout < 0.0:
            ox, oy, oz = self.view_raycast.direction.offset()
            tx = self.view_raycast.x + ox
            ty = self.view_raycast.y + oy
            tz = self.view_raycast.z + oz
            if aabb_overlap(
                self.position.x - _HALF_BOX, self.position.y, self.position.z - _HALF_BOX,
                PLAYER_COLLISIONBOX_SIZE, PLAYER_HEIGHT, PLAYER_COLLISIONBOX_SIZE,
                tx, ty, tz, 1.0, 1.0, 1.0,
            ):
                return
            stack = self.quick_select_bar[self.quick_select_bar_slot]
            self.world.set_block_and_meta(tx, ty, tz, stack.block, stack.meta)
        if self.break_place_timeout < 0.0:
            self.break_place_timeout = PLAYER_PLACE_REPLACE_TIMEOUT

    def break_block(self) -> None:
        """Remove the block being looked at."""
        if self.world is not None and self.block_in_action_range and self.break_place_timeout < 0.0:
            self.world.set_block(
                self.view_raycast.x, self.view_raycast.y, self.view_raycast.z, Block.AIR
            )
        if self.break_place_timeout < 0.0:
            self.break_place_timeout = PLAYER_PLACE_REPLACE_TIMEOUT

    def teleport(self, x: float, y: float, z: float) -> None:
        self.position = Float3(x, y, z)
        self.velocity = Float3(0.0, 0.0, 0.0)
        self.update()