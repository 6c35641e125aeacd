"""Block definitions: tiles, shapes, models, meshes, occlusion, model building and lookup."""