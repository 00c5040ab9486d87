import math

import matplotlib.pyplot as plt

from python_phasor import j, pol, phasor, phasordimension, arrowaxes

Z1 = pol(1.0, math.radians(30))

fig, ax = plt.subplots(figsize=(3.3, 2.5))

phasor(Z1, label=r"$\underline{Z}$", labeltsep=0.05, labelrelrot=True, ax=ax)
phasordimension(
    Z1.real, label=r"$R$", arrowstyle1="",
    linewidth=1, headwidth=5, headlength=10,
    labeltsep=0, color="gray", backgroundcolor="white", ax=ax
)
phasordimension(
    j * Z1.imag, origin=Z1.real, label=r"j$\cdot X$", arrowstyle1="",
    linewidth=1, headwidth=5, headlength=10,
    labeltsep=0, color="gray", backgroundcolor="white", ax=ax
)

ax.set_xlim(-0.5, 1)
ax.set_ylim(-0.5, 1)
ax.set_aspect("equal")
arrowaxes(ax, xlabel="Re", ylabel=r"j$\cdot$Im")
plt.show()
