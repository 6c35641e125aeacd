"""Vector math and voxel position, direction and rotation types."""