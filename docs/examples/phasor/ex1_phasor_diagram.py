import matplotlib.pyplot as plt

from python_phasor import Q_, j
from python_phasor import phasor, angulardimension, removeaxes
from python_phasor import calc

V1 = Q_(100 + 0j, 'V')
Z1 = Q_(30 + 40j, 'ohm')
I1 = V1 / Z1
Vr = Z1.real * I1
Vx = V1 - Vr

refV = abs(V1)
refI = abs(I1) * 0.8

fig, ax = plt.subplots(figsize=(3.3, 2.5))

phasor(V1, ref=refV, label=r"$\underline{V}_1$", labeltsep=0.1, labelrelrot=True, ax=ax)
phasor(Vr, ref=refV, label=r"$\underline{V}_r$", labeltsep=-0.25, labelrelrot=True, ax=ax)
phasor(Vx, origin=Vr, ref=refV, label=r"$\underline{V}_x$", labeltsep=-0.2, labelrelrot=True, ax=ax)
phasor(
    I1, ref=refI, label=r"$\underline{I}_1$", labeltsep=-0.2, labelrsep=0.7,
    labelrelrot=True, linestyle="--", par=-0.05, ax=ax
)

_, phi1 = calc.polar(I1)
_, phi2 = calc.polar(V1)
angulardimension(
    0.3, Q_(phi1, 'deg'), Q_(phi2, 'deg'),
    arrowstyle1=".", arrowstyle2="-|>", ha="left",
    label=r"$\varphi_1$", labelrsep=0.05, ax=ax
)

ax.set_aspect("equal")
ax.set_xlim(-1, 1)
ax.set_ylim(-1, 1)
removeaxes(ax)

print(f"I1 = {calc.polar(I1)}")
print(f"j * X = {j * Z1.imag:~P.1f}")
plt.show()
