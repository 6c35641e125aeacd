"""Mesh buffers, chunk iteration, voxel ray walking, raycasting and float comparison."""