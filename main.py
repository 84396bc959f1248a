from pathlib import Path
from typing import List, Optional

import typer

from conjugate import (
    CountSample,
    DiscretePrior,
    FlatPrior,
    GammaPrior,
    InvalidArgumentError,
    JeffreysPrior,
    NormalPrior,
    NormalSample,
)
from conjugate.config import DEFAULT_ALPHA, DEFAULT_QUANTILE_PROBS, SummaryConfig
from conjugate.normal import difference, mean
from conjugate.poisson import rate
from experiments.plots import FigureTarget, plot_posterior_density
from experiments.tables import format_table, interval_table, quantile_table

app = typer.Typer()


def _normal_prior(prior_mean: Optional[float], prior_std: Optional[float]) -> Optional[NormalPrior]:
    if prior_mean is None and prior_std is None:
        return None
    if prior_mean is None or prior_std is None:
        raise InvalidArgumentError("--prior-mean and --prior-std must be given together.")
    return NormalPrior(mean=prior_mean, std=prior_std)


def _figure_target(plots_root: Optional[Path], slug: str, save_static: bool) -> Optional[FigureTarget]:
    if plots_root is None:
        return None
    formats = ("html", "png") if save_static else ("html",)
    return FigureTarget(directory=plots_root, slug=slug, formats=formats)


@app.command()
def poisson(
    total_events: int = typer.Argument(..., help="Total number of events observed."),
    intervals: int = typer.Argument(..., help="Number of equal observation intervals."),
    prior: str = typer.Option("flat", "--prior", help="Prior family: flat, jeffreys or gamma."),
    shape: float = typer.Option(1.0, "--shape", "-r", help="Gamma prior shape r (with --prior gamma)."),
    prior_rate: float = typer.Option(0.0, "--rate", "-v", help="Gamma prior rate v (with --prior gamma)."),
    alpha: float = typer.Option(DEFAULT_ALPHA, "--alpha", help="Credible interval / test level."),
    lam0: Optional[float] = typer.Option(None, "--lam0", help="Null rate for the posterior tests."),
    probabilities: List[float] = typer.Option(
        list(DEFAULT_QUANTILE_PROBS),
        "--prob",
        help="Probabilities for the quantile table.",
        show_default=False,
    ),
    plots_root: Optional[Path] = typer.Option(None, "--plots-root", help="Directory for the density plot."),
    save_static: bool = typer.Option(False, help="Also write a PNG next to the HTML plot."),
) -> None:
    """
    Summarize the posterior distribution of a Poisson rate.
    """
    priors = {"flat": FlatPrior(), "jeffreys": JeffreysPrior()}
    try:
        if prior == "gamma":
            rate_prior = GammaPrior(shape=shape, rate=prior_rate)
        elif prior in priors:
            rate_prior = priors[prior]
        else:
            raise InvalidArgumentError(f"Unknown prior '{prior}'. Choose flat, jeffreys or gamma.")
        config = SummaryConfig(probabilities=tuple(probabilities), alpha=alpha)
        config.validate()
        posterior = rate.update(CountSample(total_events=total_events, intervals=intervals), rate_prior)
        r, v = rate.prior_parameters(rate_prior)
        decisions = None
        if lam0 is not None:
            decisions = (
                rate.one_sided_test(total_events, intervals, r, v, alpha, lam0),
                rate.one_sided_odds(total_events, intervals, r, v, lam0),
                rate.two_sided_test(total_events, intervals, r, v, alpha, lam0),
            )
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc

    print(f"[poisson] Posterior Gamma(shape={posterior.shape:g}, rate={posterior.rate:g})")
    print(f"[poisson] mean={posterior.mean:.6f} std={posterior.std:.6f} iqr={posterior.interquartile_range():.6f}")
    print(format_table(quantile_table(posterior, config)))
    print(format_table(interval_table({"rate": posterior}, alpha)))

    if decisions is not None:
        one_sided, odds, two_sided = decisions
        print(
            f"[poisson] H0: rate <= {lam0:g} -> P={one_sided.probability:.6f} odds={odds:.6f} "
            f"reject={one_sided.reject}"
        )
        print(f"[poisson] H0: rate == {lam0:g} -> reject={two_sided.reject}")

    target = _figure_target(plots_root, "poisson_rate", save_static)
    if target:
        plot_posterior_density(posterior, "Posterior of the Poisson rate", alpha=alpha, save_to=target)
        print(f"[plots] Saved figures under {target.directory}")


@app.command("normal-mean")
def normal_mean(
    sigma: float = typer.Option(..., "--sigma", help="Population standard deviation (known)."),
    observations: List[float] = typer.Option([], "--obs", help="Raw observations (repeat the flag)."),
    sample_mean: Optional[float] = typer.Option(None, "--mean", help="Sample mean, instead of --obs."),
    count: Optional[int] = typer.Option(None, "--count", help="Sample size, with --mean."),
    prior_mean: Optional[float] = typer.Option(None, "--prior-mean", help="Normal prior mean."),
    prior_std: Optional[float] = typer.Option(None, "--prior-std", help="Normal prior standard deviation."),
    alpha: float = typer.Option(DEFAULT_ALPHA, "--alpha", help="Credible interval level."),
    plots_root: Optional[Path] = typer.Option(None, "--plots-root", help="Directory for the density plot."),
    save_static: bool = typer.Option(False, help="Also write a PNG next to the HTML plot."),
) -> None:
    """
    Posterior of a Normal mean under a flat or Normal prior.
    """
    try:
        sample = _sample_from_options(observations, sample_mean, count)
        posterior = mean.update(sample, sigma, _normal_prior(prior_mean, prior_std))
        config = SummaryConfig(alpha=alpha)
        config.validate()
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc

    print(f"[normal] n={sample.count} ybar={sample.mean:.6f}")
    print(f"[normal] Posterior Normal(mean={posterior.mean:.6f}, std={posterior.std:.6f})")
    print(format_table(quantile_table(posterior, config)))
    print(format_table(interval_table({"mean": posterior}, alpha)))

    target = _figure_target(plots_root, "normal_mean", save_static)
    if target:
        plot_posterior_density(posterior, "Posterior of the Normal mean", alpha=alpha, save_to=target)
        print(f"[plots] Saved figures under {target.directory}")


@app.command("normal-discrete")
def normal_discrete(
    sigma: float = typer.Option(..., "--sigma", help="Population standard deviation (known)."),
    values: List[float] = typer.Option(..., "--value", help="Candidate mean (repeat the flag)."),
    masses: List[float] = typer.Option(..., "--mass", help="Prior mass of each candidate, in order."),
    observations: List[float] = typer.Option([], "--obs", help="Raw observations (repeat the flag)."),
    sample_mean: Optional[float] = typer.Option(None, "--mean", help="Sample mean, instead of --obs."),
    count: Optional[int] = typer.Option(None, "--count", help="Sample size, with --mean."),
) -> None:
    """
    Posterior masses of a Normal mean over a discrete set of candidates.
    """
    try:
        sample = _sample_from_options(observations, sample_mean, count)
        prior = DiscretePrior(values=tuple(values), masses=tuple(masses))
        posterior = mean.posterior_discrete(sample, sigma, prior)
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc

    print(f"[normal] n={sample.count} ybar={sample.mean:.6f}")
    for value, prior_mass, post_mass in zip(prior.values, prior.masses, posterior.masses):
        print(f"{value:>12g}  prior={prior_mass:.6f}  posterior={post_mass:.6f}")
    print(f"[normal] posterior mean={posterior.mean:.6f}")


@app.command("normal-diff")
def normal_diff(
    mean1: float = typer.Option(..., "--mean1", help="Sample mean of the first sample."),
    count1: int = typer.Option(..., "--count1", help="Size of the first sample."),
    sigma1: float = typer.Option(..., "--sigma1", help="Standard deviation of the first population."),
    mean2: float = typer.Option(..., "--mean2", help="Sample mean of the second sample."),
    count2: int = typer.Option(..., "--count2", help="Size of the second sample."),
    sigma2: float = typer.Option(..., "--sigma2", help="Standard deviation of the second population."),
    prior_mean1: Optional[float] = typer.Option(None, "--prior-mean1"),
    prior_std1: Optional[float] = typer.Option(None, "--prior-std1"),
    prior_mean2: Optional[float] = typer.Option(None, "--prior-mean2"),
    prior_std2: Optional[float] = typer.Option(None, "--prior-std2"),
    estimated: bool = typer.Option(
        False,
        "--estimated",
        help="Treat the sigmas as sample estimates (Behrens-Fisher, Satterthwaite df).",
    ),
    alpha: float = typer.Option(DEFAULT_ALPHA, "--alpha", help="Credible interval level."),
) -> None:
    """
    Posterior of the difference between two Normal means.
    """
    try:
        sample1 = NormalSample(count=count1, mean=mean1)
        sample2 = NormalSample(count=count2, mean=mean2)
        prior1 = _normal_prior(prior_mean1, prior_std1)
        prior2 = _normal_prior(prior_mean2, prior_std2)
        config = SummaryConfig(alpha=alpha)
        config.validate()
        if estimated:
            if prior1 is None and prior2 is None:
                posterior = difference.behrens_fisher_flat_posterior(sample1, sample2, sigma1, sigma2)
            else:
                posterior = difference.behrens_fisher_posterior(sample1, sample2, sigma1, sigma2, prior1, prior2)
            header = f"Student-t(location={posterior.location:.6f}, scale={posterior.scale:.6f}, df={posterior.df:g})"
        else:
            posterior = difference.difference_posterior(sample1, sample2, sigma1, sigma2, prior1, prior2)
            header = f"Normal(mean={posterior.mean:.6f}, std={posterior.std:.6f})"
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc

    print(f"[normal] Posterior of mu1 - mu2: {header}")
    print(format_table(quantile_table(posterior, config)))
    print(format_table(interval_table({"mu1 - mu2": posterior}, alpha)))


def _sample_from_options(observations: List[float], sample_mean: Optional[float], count: Optional[int]) -> NormalSample:
    if observations:
        if sample_mean is not None or count is not None:
            raise InvalidArgumentError("Use either --obs or --mean/--count, not both.")
        return NormalSample.from_observations(observations)
    if sample_mean is None:
        raise InvalidArgumentError("Provide observations with --obs or a summary with --mean/--count.")
    return NormalSample(count=count if count is not None else 1, mean=sample_mean)


if __name__ == "__main__":
    app()
