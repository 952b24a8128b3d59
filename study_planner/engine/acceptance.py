import numpy as np

def accept_solution(curr_score, new_score, temp, rng):
    diff = new_score - curr_score
    if diff > 0.0:
        return True
    if temp <= 0.0:
        return False
    p = np.exp(diff / temp)
    return p > rng.random()
