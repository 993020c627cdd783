import argparse
import logging

import numpy as np
import tqdm

import cholwishart

parser = argparse.ArgumentParser(description='Monte Carlo check of Wishart factor draws against the Wishart moments')
parser.add_argument('--dim', type=int, default=3, help='Dimension of the scale matrix')
parser.add_argument('--df', type=float, default=5.0, help='Degrees of freedom')
parser.add_argument('--num-samples', type=int, default=10000, help='Number of samples to generate')
parser.add_argument('--batch-size', type=int, default=500, help='Number of samples drawn per session')
parser.add_argument('--inverse', default=False, action='store_true', help='Sample inverse Cholesky factors')
parser.add_argument('--seed', type=int, default=0, help='Pseudo-random number generator seed')
parser.add_argument('--verbose', default=False, action='store_true', help='Log every sampling session')
args = parser.parse_args()

logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

np.random.seed(args.seed)
x = np.random.normal(size=(args.dim, args.dim))
scale = x.T@x + args.dim*np.eye(args.dim)

def experiment(df, scale, num_samples, batch_size, inverse, stream):
    total = np.zeros_like(scale)
    elapsed = 0.0
    pbar = tqdm.tqdm(total=num_samples, position=0, leave=True)
    drawn = 0
    while drawn < num_samples:
        n = min(batch_size, num_samples - drawn)
        sampler = cholwishart.BatchSampler(n, df, scale, inverse=inverse, stream=stream)
        factors = sampler.run()
        if inverse:
            # The inverse factor G satisfies inv(W) = G @ G.T.
            total += np.sum(factors@np.swapaxes(factors, -1, -2), axis=0)
        else:
            total += np.sum(np.swapaxes(factors, -1, -2)@factors, axis=0)
        elapsed += sampler.info.elapsed
        drawn += n
        pbar.set_postfix(sampler.info.asdict())
        pbar.update(n)
    pbar.close()
    return total / num_samples, elapsed

def main():
    stream = cholwishart.VariateStream(seed=args.seed)
    mean, elapsed = experiment(args.df, scale, args.num_samples, args.batch_size, args.inverse, stream)
    if args.inverse:
        expected = np.linalg.inv(scale) / (args.df - args.dim - 1)
    else:
        expected = args.df*scale
    relerr = np.linalg.norm(mean - expected) / np.linalg.norm(expected)
    logging.info('relative error of the sample mean: %.3e', relerr)
    logging.info('variates drawn: %d, sampling time: %.3f seconds', stream.num_draws, elapsed)

if __name__ == '__main__':
    main()
