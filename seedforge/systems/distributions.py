"""Statistical distributions drawn from the facade's uniform stream.

Every sampler is a pure function of the draws it consumes, so a fixed call
sequence reproduces fixed values. Rejection loops run until acceptance.
"""

from __future__ import annotations

import math

from seedforge.core.errors import ConfigurationError

_TWO_PI = 2.0 * math.pi


def _wrap_angle(theta: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    return (theta + math.pi) % _TWO_PI - math.pi


class DistributionMixin:
    """Samplers built on ``random()``; the host supplies the normal cache."""

    __slots__ = ()

    # -- continuous --

    def normal(self, mean: float = 0.0, std_dev: float = 1.0) -> float:
        """Gaussian via the Box-Muller polar method.

        Each accepted pair yields two values; the second is cached and
        returned by the next call.
        """
        if self._has_spare_normal:
            spare = self._spare_normal
            self._has_spare_normal = False
            self._spare_normal = None
            return spare * std_dev + mean

        while True:
            u = self.random() * 2.0 - 1.0
            v = self.random() * 2.0 - 1.0
            s = u * u + v * v
            if 0.0 < s < 1.0:
                break

        mul = math.sqrt(-2.0 * math.log(s) / s)
        self._spare_normal = v * mul
        self._has_spare_normal = True
        return u * mul * std_dev + mean

    def exponential(self, lam: float = 1.0) -> float:
        """Inverse CDF; *lam* is the rate (1 / mean)."""
        if lam <= 0:
            raise ConfigurationError(f"Exponential rate must be positive, got {lam}")
        return -math.log(1.0 - self.random()) / lam

    def pareto(self, alpha: float = 1.0, xm: float = 1.0) -> float:
        if alpha <= 0 or xm <= 0:
            raise ConfigurationError(f"Pareto alpha and xm must be positive, got {alpha}, {xm}")
        return xm / (1.0 - self.random()) ** (1.0 / alpha)

    def gamma(self, shape: float, scale: float = 1.0) -> float:
        """Marsaglia-Tsang squeeze; shapes below 1 use the ``U**(1/shape)`` boost."""
        if shape <= 0:
            raise ConfigurationError(f"Gamma shape must be positive, got {shape}")
        if shape < 1.0:
            boosted = self.gamma(1.0 + shape, scale)
            return boosted * self.random() ** (1.0 / shape)

        d = shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)
        while True:
            while True:
                x = self.normal()
                v = 1.0 + c * x
                if v > 0.0:
                    break
            v = v * v * v
            u = self.random()
            x2 = x * x
            if u < 1.0 - 0.0331 * x2 * x2:
                return d * v * scale
            if u <= 0.0 or math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
                return d * v * scale

    def beta(self, alpha: float, beta: float) -> float:
        """Ratio of two independent gamma draws."""
        if alpha <= 0 or beta <= 0:
            raise ConfigurationError("Alpha and beta must be positive")
        g1 = self.gamma(alpha, 1.0)
        g2 = self.gamma(beta, 1.0)
        return g1 / (g1 + g2)

    def triangular(self, low: float = 0.0, high: float = 1.0, mode: float = 0.5) -> float:
        """Collapses to *low* when the range is empty."""
        if not low <= mode <= high:
            raise ConfigurationError(f"Triangular needs low <= mode <= high, got {low}, {mode}, {high}")
        u = self.random()
        span = high - low
        if span == 0:
            return float(low)
        if u < (mode - low) / span:
            return low + math.sqrt(u * span * (mode - low))
        return high - math.sqrt((1.0 - u) * span * (high - mode))

    def log_normal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return math.exp(self.normal(mu, sigma))

    def weibull(self, scale: float = 1.0, shape: float = 1.0) -> float:
        if scale <= 0 or shape <= 0:
            raise ConfigurationError(f"Weibull scale and shape must be positive, got {scale}, {shape}")
        return scale * (-math.log(1.0 - self.random())) ** (1.0 / shape)

    def cauchy(self, location: float = 0.0, scale: float = 1.0) -> float:
        """Tangent of a uniform angle; heavy tails, no mean."""
        return location + scale * math.tan(math.pi * (self.random() - 0.5))

    def chi_squared(self, k: float) -> float:
        """Sum of *k* squared standard normals, drawn as ``gamma(k/2, 2)``."""
        if k <= 0:
            raise ConfigurationError(f"Chi-squared degrees of freedom must be positive, got {k}")
        return self.gamma(k / 2.0, 2.0)

    def student_t(self, df: float) -> float:
        if df <= 0:
            raise ConfigurationError(f"Student-t degrees of freedom must be positive, got {df}")
        z = self.normal()
        chi = self.chi_squared(df)
        return z / math.sqrt(chi / df)

    def von_mises(self, mu: float = 0.0, kappa: float = 1.0) -> float:
        """Circular normal on [-pi, pi) (Best-Fisher rejection)."""
        if kappa < 0:
            raise ConfigurationError(f"Von Mises concentration must be non-negative, got {kappa}")
        if kappa < 1e-6:
            return _wrap_angle(mu + math.pi * (2.0 * self.random() - 1.0))

        tau = 1.0 + math.sqrt(1.0 + 4.0 * kappa * kappa)
        rho = (tau - math.sqrt(2.0 * tau)) / (2.0 * kappa)
        r = (1.0 + rho * rho) / (2.0 * rho)

        while True:
            z = math.cos(math.pi * self.random())
            f = (1.0 + r * z) / (r + z)
            c = kappa * (r - f)
            u2 = self.random()
            if u2 <= 0.0 or u2 < c * (2.0 - c) or math.log(c / u2) + 1.0 - c >= 0.0:
                break

        theta = math.acos(max(-1.0, min(1.0, f)))
        if self.random() < 0.5:
            theta = -theta
        return _wrap_angle(mu + theta)

    # -- discrete --

    def poisson(self, lam: float) -> int:
        """Knuth's multiplicative method; cost grows linearly with *lam*."""
        if lam < 0:
            raise ConfigurationError(f"Poisson rate must be non-negative, got {lam}")
        limit = math.exp(-lam)
        k = 0
        p = 1.0
        while True:
            k += 1
            p *= self.random()
            if p <= limit:
                return k - 1

    def binomial(self, n: int, p: float) -> int:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ConfigurationError(f"Binomial n must be a non-negative integer, got {n!r}")
        successes = 0
        for _ in range(n):
            if self.random() < p:
                successes += 1
        return successes

    def geometric(self, p: float) -> int:
        """Number of Bernoulli trials up to and including the first success."""
        if not 0.0 < p <= 1.0:
            raise ConfigurationError(f"Geometric p must lie in (0, 1], got {p}")
        u = self.random()
        if p == 1.0:
            return 1
        return int(math.floor(math.log(1.0 - u) / math.log(1.0 - p))) + 1

    def zipf(self, n: int, s: float = 1.0) -> int:
        """Rank in 1..n with probability proportional to ``k**-s``."""
        if n < 1:
            raise ConfigurationError(f"Zipf n must be at least 1, got {n}")
        if s <= 0:
            raise ConfigurationError(f"Zipf exponent must be positive, got {s}")
        weights = [k ** -s for k in range(1, n + 1)]
        remaining = self.random() * sum(weights)
        for rank, weight in enumerate(weights, start=1):
            remaining -= weight
            if remaining <= 0:
                return rank
        return n

    def hypergeometric(self, population: int, successes: int, draws: int) -> int:
        """Successes among *draws* taken without replacement from an urn.

        The urn holds *population* items of which *successes* are marked.
        """
        if population < 0 or not 0 <= successes <= population or not 0 <= draws <= population:
            raise ConfigurationError(
                f"Invalid hypergeometric parameters N={population}, K={successes}, n={draws}"
            )
        found = 0
        remaining_marked = successes
        remaining = population
        for _ in range(draws):
            if self.random() < remaining_marked / remaining:
                found += 1
                remaining_marked -= 1
            remaining -= 1
        return found
