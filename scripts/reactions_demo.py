from beam_calc.domain.loads import PointLoad, DistributedLoad
from beam_calc.domain.supports import SupportPair
from beam_calc.engine.decompose import decompose_loads
from beam_calc.engine.reactions import solve_reactions


L = 5.0

loads = decompose_loads([
    PointLoad(position=5.0, magnitude=10.0),                   # extremo libre
    DistributedLoad(position=0.0, length=5.0, magnitude=1.0),  # w=1 en todo el voladizo
])

for left, right in [("fixed", "free"), ("free", "fixed"), ("fixed", "fixed"), ("pinned", "roller")]:
    sol = solve_reactions(L, loads, SupportPair(left, right))
    r = sol.reactions
    print(f"{left:>6}/{right:<6} [{sol.support_class.value}]")
    print("   izq:", r.left)
    print("   der:", r.right)
    for d in sol.diagnostics:
        print("   !", d.message)
