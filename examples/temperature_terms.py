import logging

import matplotlib.pyplot as plt
import numpy as np

from fuzzyclass import TrapezoidFunc

logging.basicConfig(level=logging.DEBUG)

# Generate universe variable
lb = -10.0
ub = 40.0
universe = np.linspace(lb, ub, 101)

# Define linguistic terms for a temperature sensor
cold = TrapezoidFunc('cold', None, 0.0, 5.0, 12.0)
warm = TrapezoidFunc('warm', 5.0, 12.0, 22.0, 28.0)
hot = TrapezoidFunc('hot', 22.0, 28.0, 40.0, None)

terms = [cold, warm, hot]

# Classify a batch of readings
readings = {'08:00': 4.5, '12:00': 17.0, '16:00': 25.0, '20:00': 10.0}

for term in terms:
    degrees = term.get_classifications(readings)
    print('%-5s %s average = %.3f' % (term.get_linguistic_term(), degrees, term.get_average(degrees.values())))

# Visualize the membership functions
fig, ax = plt.subplots(nrows=1, figsize=(8, 3))
for term, color in zip(terms, ['b', 'g', 'r']):
    ax.plot(universe, term.get_array(universe), color, linewidth=1.5, label=term.label)
ax.set_title('Temperature')
ax.legend()
plt.tight_layout()

warm.view(universe)
plt.show()
