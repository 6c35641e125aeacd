"""Chunk storage, the voxel world, chunk remeshing and map editing."""