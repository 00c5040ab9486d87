import matplotlib.pyplot as plt

from python_phasor import Q_, phasorsine

fig, axes = phasorsine(
    1.0, Q_(45, 'deg'),
    ylabel=r"$u,i$",
    maglabel=r"$\hat{U}$",
    labelrsep=0.3,
    color="gray",
    linestyle="--"
)
phasorsine(0.55, 0.0, add=True, axes=axes, maglabel=r"$\hat{I}$")
plt.show()
