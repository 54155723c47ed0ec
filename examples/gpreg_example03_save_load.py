'''Saving and loading a model

A model is written to a text file, read back, and both versions are
queried at the same point.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
'''
import math
import os
import tempfile
import gpreg as gp

gp.config.set_log_level("INFO")

model = gp.GaussianProcess(1, "CovSum(CovMatern5iso, CovNoise)")
model.set_parameters([math.log(0.5), 0.0, math.log(0.1)])
for x, z in [(0.0, 0.0), (0.5, 0.6), (1.0, 0.8), (2.0, 0.9)]:
    model.add_pattern([x], z)

print(gp.io.dumps(model))

with tempfile.TemporaryDirectory() as tmpdir:
    filename = os.path.join(tmpdir, "model.txt")
    gp.io.write(model, filename)
    loaded = gp.io.read(filename)

for m in (model, loaded):
    zpm, zpv = m.predict([1.5], compute_variance=True)
    print(f"mean = {zpm:.6f}, variance = {zpv:.6f}")
