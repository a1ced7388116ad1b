"""GraphQL documents used to inspect and merge pull requests."""

FIND_PULL_REQUEST_INFO = """
query FindPullRequestInfoByNumber(
  $repositoryOwner: String!
  $repositoryName: String!
  $pullRequestNumber: Int!
) {
  repository(owner: $repositoryOwner, name: $repositoryName) {
    pullRequest(number: $pullRequestNumber) {
      id
      mergeable
      merged
      state
      title
      commits(last: 1) {
        edges {
          node {
            commit {
              author {
                name
              }
              message
              messageHeadline
            }
          }
        }
      }
      reviews(last: 1) {
        edges {
          node {
            state
          }
        }
      }
    }
  }
}
"""

MERGE_PULL_REQUEST = """
mutation MergePullRequest(
  $pullRequestId: ID!
  $commitHeadline: String!
  $mergeMethod: PullRequestMergeMethod!
) {
  mergePullRequest(
    input: {
      pullRequestId: $pullRequestId
      commitHeadline: $commitHeadline
      mergeMethod: $mergeMethod
    }
  ) {
    clientMutationId
  }
}
"""
