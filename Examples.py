import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from patterns import load_nhanes, mcar, md_pattern, setup_logging
from plotting import plot_pattern

setup_logging()

nhanes = load_nhanes()
print(md_pattern(nhanes))
plot_pattern(nhanes)
plot_pattern(nhanes, vrb=["bmi", "hyp", "chl"], npat=2, rotate=True)

# multilevel data, 20 schools with 25 pupils each
rng = np.random.default_rng(10)
simdf = pd.DataFrame({
    "school": np.repeat(np.arange(20), 25),
    "iq": rng.normal(100, 15, size=500),
    "score": rng.normal(50, 10, size=500),
    "ses": rng.normal(0, 1, size=500),
})
simdf = mcar(simdf, miss=0.1, columns=["iq", "score", "ses"], random_state=10)
plot_pattern(simdf, cluster="school", square=False)
plt.show()
