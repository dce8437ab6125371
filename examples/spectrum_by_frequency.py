"""Plot a 2D power spectrum with axes labelled by signed frequency index."""

import numpy as np
import matplotlib.pyplot as plt

from fftindexing import FrequencyGrid, FrequencyIndex, getitem


ny, nx = 48, 64
y, x = np.mgrid[0:ny, 0:nx]
signal = np.cos(2.0 * np.pi * (3 * x / nx + 5 * y / ny)) + 0.5 * np.cos(2.0 * np.pi * (-7 * x / nx))
spectrum = np.abs(np.fft.fft2(signal)) ** 2

grid = FrequencyGrid(spectrum)
peaks = sorted(grid, key=lambda index: getitem(spectrum, index), reverse=True)[:4]
for index in peaks:
    print(index, grid.position(index), f"{getitem(spectrum, index):.3g}")

# The plane wave above puts its power at (ky, kx) = (5, 3) and its mirror image.
assert getitem(spectrum, FrequencyIndex(5, 3)) == spectrum[5, 3]
assert np.isclose(getitem(spectrum, FrequencyIndex(-5, -3)), spectrum[5, 3])

ky, kx = grid.axis_arrays()
plt.imshow(
    np.fft.fftshift(spectrum),
    extent=(kx.min() - 0.5, kx.max() + 0.5, ky.max() + 0.5, ky.min() - 0.5),
    cmap="magma",
)
plt.xlabel(r"$k_x$ (bin)")
plt.ylabel(r"$k_y$ (bin)")
plt.title("Power spectrum in frequency-index coordinates")
plt.colorbar()
plt.tight_layout()
plt.show()
